"""
Translation Verifier.

Checks that the rules produced for a pattern are logically equivalent to
it when every literal is read as a ground proposition. This validates the
connective rewriting (negation normal form, De Morgan, distribution of
AND over OR, universal elimination) independently of how identifiers are
scoped.
"""

from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from z3 import Solver, Not, sat, unsat, is_true

from ..datalog.types import DatalogHead, DatalogRule
from ..dsl.patterns import All, Pattern, Some
from ..errors import InvalidPatternError
from ..translator.rules import DatalogTranslator
from .z3_encoder import GroundEncoder


@dataclass
class VerificationResult:
    """Result of pattern ↔ rules verification."""

    equivalent: bool

    # Bidirectional checks
    pattern_implies_rules: bool
    rules_imply_pattern: bool

    counterexample: Dict[str, bool] = field(default_factory=dict)
    message: str = ""

    def __repr__(self):
        status = "EQUIVALENT" if self.equivalent else "NOT EQUIVALENT"
        return f"VerificationResult({status}: {self.message})"


class TranslationVerifier:
    """
    Verifies translated rule sets against their source pattern.

    Verification strategy:
    1. Encode the rule set by Clark completion
    2. Encode the pattern; the top-level quantifier binds the rule's label,
       so both Some(x, p) and All(x, p) at the root read as x ∧ p
    3. Check pattern → head and head → pattern
    4. Report a counterexample assignment if either fails
    """

    def __init__(self, translator: Optional[DatalogTranslator] = None):
        self.translator = translator or DatalogTranslator()

    def verify(
        self,
        pattern: Pattern,
        rules: Optional[List[DatalogRule]] = None,
        rule_name: str = "verified",
    ) -> VerificationResult:
        """
        Verify `rules` against `pattern`.

        Args:
            pattern: the quantified instruction pattern
            rules: its translation; translated here when omitted
            rule_name: name of the main rule in `rules`

        Raises:
            InvalidPatternError: `pattern` is not rooted at Some/All
            ValueError: a literal carries a placeholder label
        """
        if not isinstance(pattern, (Some, All)):
            raise InvalidPatternError(pattern)
        if pattern.instruction.has_placeholder_label():
            raise ValueError("Ground verification needs a concrete label on the quantified instruction")

        if rules is None:
            rules = self.translator.translate(pattern, rule_name)

        encoder = GroundEncoder()
        definitions = encoder.encode_rules(rules)
        head = encoder.constant(DatalogHead(rule_name, [pattern.instruction.label]).key())
        expected = encoder.encode_pattern(Some(pattern.instruction, pattern.pattern))

        forward, ce1 = self._check_implication(definitions, expected, head, encoder)
        backward, ce2 = self._check_implication(definitions, head, expected, encoder)

        equivalent = forward and backward
        if equivalent:
            message = f"{rule_name} is equivalent to its pattern"
        else:
            issues = []
            if not forward:
                issues.append("pattern holds where the rules derive nothing")
            if not backward:
                issues.append("rules derive the head where the pattern fails")
            message = "; ".join(issues)

        return VerificationResult(
            equivalent=equivalent,
            pattern_implies_rules=forward,
            rules_imply_pattern=backward,
            counterexample=ce1 or ce2 or {},
            message=message,
        )

    def _check_implication(
        self,
        definitions,
        antecedent,
        consequent,
        encoder: GroundEncoder,
    ) -> Tuple[bool, Optional[Dict[str, bool]]]:
        """
        Check if antecedent → consequent is valid under the rule definitions.

        Valid iff there is no assignment where antecedent holds but consequent doesn't.
        """
        s = Solver()
        s.add(*definitions)
        s.add(antecedent)
        s.add(Not(consequent))

        result = s.check()
        if result == unsat:
            return (True, None)
        if result == sat:
            model = s.model()
            return (False, {
                name: is_true(model.eval(const, model_completion=True))
                for name, const in encoder.constants.items()
            })
        return (False, {})
