import io
import unittest
from contextlib import redirect_stdout

from dunq.lang.error import (
    ArityError,
    DunqError,
    ErrorHandler,
    ParseError,
    UnboundIdentifierError,
    UnknownValueError,
)


class DunqErrorTestCase(unittest.TestCase):

    def test_message(self):
        error = UnboundIdentifierError("reference to unbound identifier '{}'", "garbage")
        self.assertEqual("reference to unbound identifier 'garbage'", error.msg)
        self.assertEqual("reference to unbound identifier 'garbage'", str(error))
        self.assertEqual("garbage", error.expr)
        self.assertFalse(error.internal)

    def test_multiple_exprs(self):
        error = ArityError("'{}' expects exactly 2 arguments, got {}", ("+", 1))
        self.assertEqual("'+' expects exactly 2 arguments, got 1", error.msg)
        self.assertEqual(["+", "1"], error.exprs)
        self.assertEqual("+", error.expr)

    def test_no_exprs(self):
        error = DunqError("keyboard interrupt")
        self.assertEqual("keyboard interrupt", error.msg)
        self.assertEqual("", error.expr)

    def test_internal(self):
        error = UnknownValueError("encountered unknown value '{}'", "None")
        self.assertTrue(error.internal)
        self.assertFalse(error.diagnosis)
        self.assertIsInstance(error, DunqError)


class ErrorHandlerTestCase(unittest.TestCase):

    def report(self, error_handler, exc):
        out = io.StringIO()
        with redirect_stdout(out):
            with error_handler:
                raise exc
        return out.getvalue()

    def test_reports_dunq_error(self):
        error_handler = ErrorHandler(fatal=False)
        error_handler.register_file("<in>")
        error_handler.register_line("<in>", "(+ garbage 1)", 3)

        output = self.report(error_handler, UnboundIdentifierError("reference to unbound identifier '{}'", "garbage"))
        self.assertIn("File '<in>', line 3", output)
        self.assertIn("error: ", output)
        self.assertIn("reference to unbound identifier", output)
        self.assertIn("^~~~~~", output)
        self.assertEqual({"<in>": (None, None)}, error_handler.traceback)

    def test_fatal(self):
        error_handler = ErrorHandler(fatal=True)
        with redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                with error_handler:
                    raise ParseError("unexpected EOF while reading")
        self.assertEqual(1, cm.exception.code)

    def test_recursion_error(self):
        output = self.report(ErrorHandler(fatal=False), RecursionError())
        self.assertIn("maximum recursion depth exceeded", output)

    def test_unknown_error_propagates(self):
        error_handler = ErrorHandler(fatal=False)
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(KeyError):
                with error_handler:
                    raise KeyError("{oops}")
        self.assertIn("[internal] ", out.getvalue())
        self.assertIn("unknown error", out.getvalue())

    def test_system_exit_propagates(self):
        with self.assertRaises(SystemExit):
            with ErrorHandler(fatal=False):
                raise SystemExit(2)

    def test_diagnose(self):
        error = UnboundIdentifierError("reference to unbound identifier '{}'", "y")
        self.assertIsNone(ErrorHandler.diagnose(error, "(+ x 1)"))

        diagnosis = ErrorHandler.diagnose(error, "(+ y 1)")
        self.assertIn("(+ ", diagnosis)
        self.assertIn(" 1)", diagnosis)
        self.assertTrue(diagnosis.splitlines()[-1].startswith("     "))

    def test_warn(self):
        error_handler = ErrorHandler(fatal=False)
        error_handler.register_file("<in>")
        error_handler.register_line("<in>", "\"a\"", 1)

        out = io.StringIO()
        with redirect_stdout(out):
            error_handler.warn("'{}' contains '\"'", "a")
        self.assertIn("warning: ", out.getvalue())
        self.assertIn("<in>:1: ", out.getvalue())


if __name__ == '__main__':
    unittest.main()
