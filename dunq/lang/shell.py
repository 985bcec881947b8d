"""Handles interactive/command-line mode for the DUNQ interpreter. Uses cmd as backend."""

import cmd

from dunq.lang.session import Session


class Shell(cmd.Cmd):
    """DUNQ interpreter shell."""
    intro = "DUNQ interpreter :: Python backend\nType '?' or 'help' for more information."
    primary_prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    prompt = primary_prompt

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Executes arbitrary DUNQ expressions."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line, add_to_prev = Session.preprocess_line(line, self._tmp_line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self.primary_prompt

                self.sess.add(line, self.line_num)
                self.sess.run()

                while self.sess.results:
                    print(self.sess.pop())

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the DUNQ interpreter!\n\n"
              "DUNQ is a small functional language written as S-expressions. It has numbers, \n"
              "\"strings\", true/false, (if test then else), (lam (x y) body) and function \n"
              "application. The primitive operators are + - * / <= and equal?, each taking \n"
              "exactly two arguments.\n\n"
              "Try it out by typing '((lam (x) (+ 1 x)) 2)'. This will apply a function \n"
              "adding one to 2, giving 3 as the result.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
