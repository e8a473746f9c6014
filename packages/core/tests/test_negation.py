"""
Test: logical laws of the rewrite engine

Each law compares the translation of two equivalent patterns, each in its
own fresh session, and expects structurally identical bodies and
supporting rules.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from patlog_core.datalog.naming import NameGenerator
from patlog_core.dsl import All, And, Atom, Implies, Instruction, Not, Or, Some
from patlog_core.terms import Label, PlaceholderLabel, Variable
from patlog_core.translator import PatternTranslator, TranslationSession


L1, L2 = Label("L1"), Label("L2")
V = Variable("v")

a = Atom("a", [L1])
b = Atom("b", [V])
x = Instruction("x", L1, [V])
z = Instruction("z", L2)


def translation(pattern):
    session = TranslationSession(NameGenerator())
    bodies = PatternTranslator(session).translate(pattern)
    return bodies, session.supporting_rules


SAMPLE_PATTERNS = [
    a,
    Not(b),
    And([a, b]),
    Or([a, Not(b)]),
    Implies(a, b),
    Some(z, a),
    All(z, Or([a, b])),
    Some(x, All(z, Implies(a, b))),
]


class TestDeMorgan:

    def test_not_and(self):
        assert translation(Not(And([a, b]))) == translation(Or([Not(a), Not(b)]))

    def test_not_or(self):
        assert translation(Not(Or([a, b]))) == translation(And([Not(a), Not(b)]))

    def test_not_and_nary(self):
        c = Atom("c")
        assert translation(Not(And([a, b, c]))) == translation(Or([Not(a), Not(b), Not(c)]))


class TestImplication:

    def test_implies_is_not_lhs_or_rhs(self):
        assert translation(Implies(a, b)) == translation(Or([Not(a), b]))

    def test_negated_implies(self):
        assert translation(Not(Implies(a, b))) == translation(And([a, Not(b)]))


class TestDoubleNegation:

    @pytest.mark.parametrize("pattern", SAMPLE_PATTERNS, ids=repr)
    def test_double_negation(self, pattern):
        assert translation(Not(Not(pattern))) == translation(pattern)


class TestQuantifierDuality:

    @pytest.mark.parametrize("body", [a, Not(b), And([a, b]), Or([a, b]), Some(z, a)], ids=repr)
    def test_not_some_is_all_not(self, body):
        assert translation(Not(Some(x, body))) == translation(All(x, Not(body)))

    @pytest.mark.parametrize("body", [a, Not(b), And([a, b]), Or([a, b]), All(z, a)], ids=repr)
    def test_not_all_is_some_not(self, body):
        assert translation(Not(All(x, body))) == translation(Some(x, Not(body)))

    def test_duality_with_placeholder_label(self):
        anywhere = Instruction("x", PlaceholderLabel(), [V])
        assert translation(Not(Some(anywhere, b))) == translation(All(anywhere, Not(b)))
