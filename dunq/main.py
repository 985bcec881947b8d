"""Uses the DUNQ interpreter to evaluate an expression given on the command line, or runs in command-line mode. Also
uses the error handling context manager. Called from the dunq console script.
"""

import argparse
import sys

from dunq.lang.error import ErrorHandler
from dunq.lang.session import Session
from dunq.lang.shell import Shell


def main(argv=None):
    """Runs DUNQ interpreter. Called from the dunq console script."""
    assert sys.version_info >= (3, 8), "dunq cannot be run with python < 3.8"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="dunq", description="DUNQ interpreter")
        parser.add_argument("expr", help="expression(s) to evaluate (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--recursion-limit", type=int, default=Session.RECURSION_LIMIT,
                            help="maximum Python recursion depth, which bounds DUNQ call depth "
                                 f"(default: {Session.RECURSION_LIMIT})")
        args = parser.parse_args(argv)

        sys.setrecursionlimit(args.recursion_limit)

        if args.expr is not None:
            sess = Session(error_handler, Session.ARG_FILE, cmd_line=False)
            sess.add(args.expr)
            sess.run()

            for result in sess.results:
                print(result)

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
