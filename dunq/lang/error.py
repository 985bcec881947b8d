"""Error handling for the DUNQ language. Only DunqErrors should be encountered during running: if another type of error
is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Every failure is a hard stop of the current evaluation. The core never recovers from its own errors, it only raises
them; ErrorHandler is the single place where they are reported to a human.
"""

import sys

from termcolor import colored


class DunqError(Exception):
    """Templates an error message so that it names the violated contract. msg is a format string whose '{}'
    placeholders are filled with exprs, the offending expression texts. exprs[0] is the expression that caused the
    error and is used for diagnosis.
    """

    def __init__(self, msg, exprs=None, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.template = msg
        self.exprs = [str(expr) for expr in exprs]
        self.msg = msg.format(*self.exprs)
        self.expr = self.exprs[0] if self.exprs else ""
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)

    def highlighted(self):
        """Returns self.msg with expr snippets bolded."""
        return self.template.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))


class ParseError(DunqError):
    """Input does not have the shape of any DUNQ term."""


class UnboundIdentifierError(DunqError):
    """Identifier is not bound in the environment chain."""


class ArityError(DunqError):
    """Number of arguments differs from the number of parameters/operands expected."""


class TypeMismatchError(DunqError):
    """Value of the wrong variant where a Boolean test or a numeric operand is required."""


class DivideByZeroError(DunqError):
    """Second operand of '/' is zero."""


class NotCallableError(DunqError):
    """Function position evaluated to something that is neither a closure nor a primitive operator."""


class InternalError(DunqError):
    """Superclass for defensive errors that well-formed input can never trigger."""

    def __init__(self, msg, exprs=None):
        super().__init__(msg, exprs, diagnosis=False, internal=True)


class UnknownOperatorError(InternalError):
    """Primitive operator reference names no known operator."""


class UnknownTermError(InternalError):
    """Evaluator was handed something that is not an AST node."""


class UnknownValueError(InternalError):
    """Serializer was handed something that is not a runtime value."""


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report DUNQ errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    def _current_line(self):
        for line, __ in self.traceback.values():
            if line:
                return line
        return None

    @staticmethod
    def diagnose(error, line, warning=False):
        """Returns line with error.expr highlighted and underlined, or None if error.expr is not part of line."""
        start = line.find(error.expr) if error.expr else -1
        if start == -1:
            return None
        end = start + max(len(error.expr), 1)
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], color, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args (same as DunqError's)."""
        warning = DunqError(*args, **kwargs)

        location = ""
        for file, (line, line_num) in self.traceback.items():
            if line:
                location = colored(f"{file}:{line_num}: ", attrs=["bold"])
                break

        print(location + colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + warning.highlighted())

        line = self._current_line()
        if line and warning.diagnosis:
            diagnosis = ErrorHandler.diagnose(warning, line, warning=True)
            if diagnosis:
                print(diagnosis)

    def throw(self, error):
        """Reports error using error and self.traceback. error must be a DunqError, and self.traceback must be a dict of
        file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        for file, (line, line_num) in self.traceback.items():
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.highlighted()
        print(error_msg)

        line = self._current_line()
        if line and error.diagnosis:
            diagnosis = ErrorHandler.diagnose(error, line)
            if diagnosis:
                print(diagnosis)

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # reset lines (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(DunqError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(DunqError("maximum recursion depth exceeded (see --recursion-limit)"))
        elif exc_type is not None and issubclass(exc_type, DunqError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(DunqError("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
