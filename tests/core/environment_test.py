import unittest

from dunq.core.data import Binding, BoolV, NumV, PrimV, StringV, Symbol
from dunq.core.environment import EMPTY_ENV, TOP_ENV, Environment, extend, lookup
from dunq.lang.error import ArityError, UnboundIdentifierError


X, Y = Symbol("x"), Symbol("y")


class EnvironmentTestCase(unittest.TestCase):

    def test_from_bindings(self):
        env = Environment.from_bindings(Binding(X, NumV(1)), Binding(Y, NumV(2)))
        self.assertEqual([X, Y], env.names)
        self.assertEqual(2, len(env))
        self.assertEqual(0, len(EMPTY_ENV))

    def test_top_env(self):
        cases = {
            "true": BoolV(True),
            "false": BoolV(False),
            "+": PrimV(Symbol("+")),
            "-": PrimV(Symbol("-")),
            "*": PrimV(Symbol("*")),
            "/": PrimV(Symbol("/")),
            "<=": PrimV(Symbol("<=")),
            "equal?": PrimV(Symbol("equal?")),
        }
        for name, expected in cases.items():
            self.assertEqual(expected, lookup(Symbol(name), TOP_ENV), name)
        self.assertEqual(len(cases), len(TOP_ENV))

    def test_lookup_unbound(self):
        should_raise = [(Symbol("garbage"), TOP_ENV), (X, EMPTY_ENV)]
        for name, env in should_raise:
            with self.assertRaises(UnboundIdentifierError) as cm:
                lookup(name, env)
            self.assertEqual(name, cm.exception.expr)

    def test_extend(self):
        env = extend(TOP_ENV, [X, Y], [NumV(1), StringV("a")])
        self.assertEqual(NumV(1), lookup(X, env))
        self.assertEqual(StringV("a"), lookup(Y, env))
        self.assertEqual(BoolV(True), lookup(Symbol("true"), env))
        self.assertEqual([X, Y] + TOP_ENV.names, env.names)

    def test_extend_shares_tail(self):
        env = extend(TOP_ENV, [X], [NumV(1)])
        self.assertIs(TOP_ENV, env.rest)
        self.assertIs(env, extend(env, [], []))

    def test_extend_is_persistent(self):
        self.assertRaises(UnboundIdentifierError, lookup, X, TOP_ENV)
        outer = extend(TOP_ENV, [X], [NumV(1)])
        extend(outer, [X, Y], [NumV(2), NumV(3)])
        self.assertEqual(NumV(1), lookup(X, outer))
        self.assertRaises(UnboundIdentifierError, lookup, Y, outer)

    def test_shadowing(self):
        outer = extend(TOP_ENV, [X], [NumV(1)])
        inner = extend(outer, [X], [NumV(2)])
        self.assertEqual(NumV(2), lookup(X, inner))
        self.assertEqual(NumV(1), lookup(X, outer))

        shadowed = extend(TOP_ENV, [Symbol("true")], [BoolV(False)])
        self.assertEqual(BoolV(False), lookup(Symbol("true"), shadowed))

    def test_duplicate_names(self):
        env = extend(EMPTY_ENV, [X, X], [NumV(1), NumV(2)])
        self.assertEqual(NumV(1), lookup(X, env))

    def test_extend_arity(self):
        should_raise = [([X], []), ([], [NumV(1)]), ([X, Y], [NumV(1)])]
        for names, values in should_raise:
            self.assertRaises(ArityError, extend, TOP_ENV, names, values)


if __name__ == '__main__':
    unittest.main()
