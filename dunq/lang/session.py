"""Session control for the DUNQ language. Reads DUNQ source text, evaluates it and collects the results, either in
command-line mode (the shell) or for a single expression given as an argument.
"""

from dunq.core.serializer import is_ambiguous, serialize
from dunq.interpreter import interp
from dunq.lang.reader import paren_balance, read_many, write


class Session:
    """Governs a DUNQ session: queued terms and the serialized results of running them."""
    SH_FILE = "<in>"      # command-line interpreter filename
    ARG_FILE = "<expr>"   # expression passed as an argument
    RECURSION_LIMIT = 10000

    def __init__(self, error_handler, path=SH_FILE, cmd_line=True):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.to_exec = []  # list of (line num, term) to execute
        self.results = []  # serialized values, oldest first

        if self.cmd_line:
            self.error_handler.fatal = False

    @staticmethod
    def preprocess_line(line, add_to_prev=""):
        """Preprocesses a line from the command-line. add_to_prev is the unfinished text of previous lines, if any.
        Returns the combined line and whether or not a line continuation is necessary.
        """
        if add_to_prev:
            line = f"{add_to_prev} {line}"
        line = line.strip()
        return line, paren_balance(line) > 0

    def add(self, expr, line_num=1):
        """Reads every term in expr and queues it. Evaluation is delayed until run is called."""
        self.error_handler.register_line(self.path, expr, line_num)  # in case error is raised

        for term in read_many(expr):
            self.to_exec.append((line_num, term))

        self.error_handler.remove_line(self.path)  # error was not raised

    def run(self):
        """Runs the queued terms in order. Raises the first error encountered, which discards the whole
        batch: results are only kept once every queued term has run.
        """
        to_exec, self.to_exec = self.to_exec, []
        results = []

        for line_num, term in to_exec:
            self.error_handler.register_line(self.path, write(term), line_num)

            value = interp(term)
            if is_ambiguous(value):
                self.error_handler.warn("'{}' contains '\"' and will not read back as written", value.s)
            results.append(serialize(value))

            self.error_handler.remove_line(self.path)

        self.results.extend(results)

    def pop(self):
        """Removes and returns the oldest result."""
        return self.results.pop(0)
