"""
Encodes patterns and translated rule sets to Z3 under a ground reading.

Every literal is read as a propositional constant named after its
rendering, so `P(L1)` in a pattern and `P(L1)` in a rule body are the
same Z3 constant. Quantified instructions are read as propositions too:

    Some(x, p)  →  x ∧ p
    All(x, p)   →  x ⇒ p

Rule sets are encoded by Clark completion, `head ≡ ∨ bodies` for each
head. Translated programs are non-recursive and stratified, so the
completion is exact.
"""

from typing import Dict, List

from z3 import (
    Bool,
    BoolRef,
    BoolVal,
    And as Z3And,
    Or as Z3Or,
    Not as Z3Not,
    Implies as Z3Implies,
)

from ..datalog.types import DatalogBody, DatalogRule, Literal
from ..dsl.patterns import All, And, Atom, Implies, Not, Or, Pattern, Some
from ..dsl.types import Instruction
from ..errors import UnsupportedPatternError
from ..terms import has_placeholder


def _conjunction(parts: List[BoolRef]) -> BoolRef:
    if not parts:
        return BoolVal(True)
    if len(parts) == 1:
        return parts[0]
    return Z3And(*parts)


def _disjunction(parts: List[BoolRef]) -> BoolRef:
    if not parts:
        return BoolVal(False)
    if len(parts) == 1:
        return parts[0]
    return Z3Or(*parts)


class GroundEncoder:
    """
    Encodes patterns, bodies and rules to Z3 propositional formulas.

    Constants are created on demand and shared between everything encoded
    by the same encoder.
    """

    def __init__(self):
        self.constants: Dict[str, BoolRef] = {}

    def constant(self, key: str) -> BoolRef:
        if key not in self.constants:
            self.constants[key] = Bool(key)
        return self.constants[key]

    def encode_literal(self, literal: Literal) -> BoolRef:
        if has_placeholder(literal.args):
            raise ValueError(f"Ground encoding needs concrete labels, got {literal}")
        const = self.constant(literal.key())
        return const if literal.positive else Z3Not(const)

    def encode_instruction(self, instruction: Instruction) -> BoolRef:
        return self.encode_literal(instruction.to_literal())

    def encode_pattern(self, pattern: Pattern) -> BoolRef:
        """Encode a pattern tree."""
        if isinstance(pattern, Atom):
            return self.encode_literal(pattern.to_literal())

        elif isinstance(pattern, Not):
            return Z3Not(self.encode_pattern(pattern.pattern))

        elif isinstance(pattern, And):
            return _conjunction([self.encode_pattern(p) for p in pattern.patterns])

        elif isinstance(pattern, Or):
            return _disjunction([self.encode_pattern(p) for p in pattern.patterns])

        elif isinstance(pattern, Implies):
            return Z3Implies(self.encode_pattern(pattern.lhs), self.encode_pattern(pattern.rhs))

        elif isinstance(pattern, Some):
            return Z3And(self.encode_instruction(pattern.instruction), self.encode_pattern(pattern.pattern))

        elif isinstance(pattern, All):
            return Z3Implies(self.encode_instruction(pattern.instruction), self.encode_pattern(pattern.pattern))

        raise UnsupportedPatternError(pattern)

    def encode_body(self, body: DatalogBody) -> BoolRef:
        return _conjunction([self.encode_literal(lit) for lit in body])

    def encode_rules(self, rules: List[DatalogRule]) -> List[BoolRef]:
        """
        Clark completion of a rule set.

        Returns:
            One `head ≡ ∨ bodies` constraint per distinct head, in order of
            first appearance
        """
        bodies_by_head: Dict[str, List[BoolRef]] = {}
        for rule in rules:
            bodies_by_head.setdefault(rule.head.key(), []).append(self.encode_body(rule.body))

        return [
            self.constant(head) == _disjunction(bodies)
            for head, bodies in bodies_by_head.items()
        ]
