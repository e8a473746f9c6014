"""
Tests for the Z3 ground encoder and translation verifier.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from z3 import Solver, Not as Z3Not, unsat

from patlog_core import (
    All,
    And,
    Atom,
    DatalogTranslator,
    Implies,
    Instruction,
    InvalidPatternError,
    Label,
    Not,
    Or,
    PlaceholderLabel,
    Some,
    Variable,
)
from patlog_core.verify import GroundEncoder, TranslationVerifier


L0, L1, L2 = Label("L0"), Label("L1"), Label("L2")
V = Variable("v")

y = Instruction("y", L0)
x = Instruction("x", L1, [V])
z = Instruction("z", L2)
p = Atom("p", [L1])
q = Atom("q", [V])
r = Atom("r", [L2, L1])


def is_valid(formula):
    s = Solver()
    s.add(Z3Not(formula))
    return s.check() == unsat


class TestGroundEncoder:

    def test_same_literal_same_constant(self):
        encoder = GroundEncoder()
        first = encoder.encode_pattern(p)
        second = encoder.encode_pattern(Atom("p", [Label("L1")]))
        assert first.eq(second)
        assert list(encoder.constants) == ["p(L1)"]

    def test_de_morgan_is_valid(self):
        encoder = GroundEncoder()
        lhs = encoder.encode_pattern(Not(And([p, q])))
        rhs = encoder.encode_pattern(Or([Not(p), Not(q)]))
        assert is_valid(lhs == rhs)

    def test_quantifier_reading(self):
        encoder = GroundEncoder()
        universal = encoder.encode_pattern(All(x, p))
        negated_existential = encoder.encode_pattern(Not(Some(x, Not(p))))
        assert is_valid(universal == negated_existential)

    def test_empty_connectives(self):
        encoder = GroundEncoder()
        assert is_valid(encoder.encode_pattern(And([])))
        assert is_valid(Z3Not(encoder.encode_pattern(Or([]))))

    def test_placeholder_rejected(self):
        with pytest.raises(ValueError):
            GroundEncoder().encode_pattern(Atom("p", [PlaceholderLabel()]))

    def test_rules_completion(self):
        translator = DatalogTranslator()
        rules = translator.translate(Some(y, Or([p, q])), "R")
        encoder = GroundEncoder()
        definitions = encoder.encode_rules(rules)
        assert len(definitions) == 1


class TestTranslationVerifier:

    @pytest.mark.parametrize("pattern", [
        Some(y, All(x, p)),
        Some(y, And([Atom("q", [L1]), All(x, p)])),
        Some(y, And([Or([p, q]), r])),
        Some(y, Not(And([p, q]))),
        Some(y, Not(Or([p, Not(q)]))),
        Some(y, Implies(p, Not(q))),
        Some(y, All(x, Some(z, r))),
        Some(y, Not(All(x, Implies(p, q)))),
        All(y, All(x, Or([p, All(z, And([q, r]))]))),
        Some(y, And([All(x, p), All(z, Not(r))])),
    ], ids=repr)
    def test_translation_is_equivalent(self, pattern):
        result = TranslationVerifier().verify(pattern, rule_name="R")
        assert result.equivalent, result.message
        assert result.pattern_implies_rules
        assert result.rules_imply_pattern

    def test_verifies_given_rules(self):
        pattern = Some(y, All(x, p))
        rules = DatalogTranslator().translate(pattern, "check")
        result = TranslationVerifier().verify(pattern, rules, rule_name="check")
        assert result.equivalent
        assert "equivalent" in repr(result).lower()

    def test_missing_alternative_is_detected(self):
        pattern = Some(y, Or([p, q]))
        rules = DatalogTranslator().translate(pattern, "R")
        result = TranslationVerifier().verify(pattern, rules[:1], rule_name="R")

        assert not result.equivalent
        assert not result.pattern_implies_rules
        assert result.rules_imply_pattern
        assert result.counterexample["q(v)"] is True
        assert result.counterexample["p(L1)"] is False

    def test_flipped_polarity_is_detected(self):
        pattern = Some(y, All(x, p))
        rules = DatalogTranslator().translate(pattern, "R")
        support = rules[1]
        support.body.literals[-1] = support.body.literals[-1].negate()

        result = TranslationVerifier().verify(pattern, rules, rule_name="R")
        assert not result.equivalent
        assert "NOT EQUIVALENT" in repr(result)

    def test_invalid_root(self):
        with pytest.raises(InvalidPatternError):
            TranslationVerifier().verify(And([p, q]))

    def test_placeholder_root_rejected(self):
        with pytest.raises(ValueError):
            TranslationVerifier().verify(Some(Instruction("y", PlaceholderLabel()), p))
