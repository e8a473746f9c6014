"""
Translates patterns into alternative Datalog bodies.

Every pattern becomes a list of conjunctive bodies whose disjunction is
equivalent to it. Negation is pushed down to atoms (De Morgan,
implication elimination, quantifier duality) and universal quantifiers,
which Datalog cannot express, are rewritten as negated auxiliary
predicates:

    ∀x. p   ≡   ¬∃x. ¬p

The auxiliary predicate is defined by supporting rules collected on the
session.
"""

import logging
from typing import List

from ..datalog.bodies import collapse_bodies, prepend, singleton
from ..datalog.types import DatalogBody, DatalogHead, DatalogRule
from ..dsl.patterns import All, And, Atom, Implies, Not, Or, Pattern, Some
from ..errors import UnsupportedPatternError
from .session import TranslationSession

logger = logging.getLogger(__name__)


class PatternTranslator:
    """
    Recursive rewrite engine over one translation session.

    Usage:
        session = TranslationSession(NameGenerator())
        bodies = PatternTranslator(session).translate(pattern)
        # session.supporting_rules now defines every auxiliary predicate
    """

    def __init__(self, session: TranslationSession):
        self.session = session

    def translate(self, pattern: Pattern) -> List[DatalogBody]:
        """
        Translate `pattern` into alternative bodies.

        Returns:
            Bodies whose disjunction is equivalent to `pattern` given the
            labels and variables already in scope

        Raises:
            UnsupportedPatternError: a node is not a known pattern type
            PatternDepthError: the configured nesting bound is exceeded
        """
        self.session.enter()
        try:
            return self._dispatch(pattern)
        finally:
            self.session.leave()

    def _dispatch(self, pattern: Pattern) -> List[DatalogBody]:
        if isinstance(pattern, Atom):
            return self._translate_atom(pattern)
        elif isinstance(pattern, Not):
            return self._translate_not(pattern)
        elif isinstance(pattern, And):
            return self._translate_and(pattern)
        elif isinstance(pattern, Or):
            return self._translate_or(pattern)
        elif isinstance(pattern, Implies):
            # a => b === (!a or b)
            return self.translate(Or([Not(pattern.lhs), pattern.rhs]))
        elif isinstance(pattern, Some):
            return self._translate_some(pattern)
        elif isinstance(pattern, All):
            return self._translate_all(pattern)

        raise UnsupportedPatternError(pattern)

    def _translate_atom(self, atom: Atom) -> List[DatalogBody]:
        self.session.scope.register(atom)
        return [singleton(atom)]

    def _translate_not(self, not_: Not) -> List[DatalogBody]:
        negated = not_.pattern

        if isinstance(negated, Atom):
            # negative literals bind nothing, so nothing is registered
            return [singleton(negated.to_literal().negate())]
        elif isinstance(negated, And):
            # push negation inside
            return self.translate(Or([Not(p) for p in negated.patterns]))
        elif isinstance(negated, Or):
            return self.translate(And([Not(p) for p in negated.patterns]))
        elif isinstance(negated, Implies):
            # !(!a or b) === (a and !b)
            return self.translate(And([negated.lhs, Not(negated.rhs)]))
        elif isinstance(negated, Some):
            return self.translate(All(negated.instruction, Not(negated.pattern)))
        elif isinstance(negated, All):
            return self.translate(Some(negated.instruction, Not(negated.pattern)))
        elif isinstance(negated, Not):
            return self.translate(negated.pattern)

        raise UnsupportedPatternError(negated, context="Not")

    def _translate_and(self, and_: And) -> List[DatalogBody]:
        bodies: List[DatalogBody] = []
        for pattern in and_.patterns:
            bodies = collapse_bodies(bodies, self.translate(pattern))
        return bodies

    def _translate_or(self, or_: Or) -> List[DatalogBody]:
        bodies: List[DatalogBody] = []
        for pattern in or_.patterns:
            bodies.extend(self.translate(pattern))
        return bodies

    def _translate_some(self, some: Some) -> List[DatalogBody]:
        instruction = self.session.resolve_label(some.instruction)
        self.session.scope.register(instruction)
        return collapse_bodies([singleton(instruction)], self.translate(some.pattern))

    def _translate_all(self, all_: All) -> List[DatalogBody]:
        scope = self.session.scope
        instruction = self.session.resolve_label(all_.instruction)

        labels_in_all = instruction.all_labels() | all_.pattern.labels()
        vars_in_all = instruction.all_variables() | all_.pattern.variables()

        # Only identifiers bound by the enclosing context become parameters
        # of the auxiliary predicate.
        labels_inters = scope.bound_labels(labels_in_all)
        vars_inters = scope.bound_variables(vars_in_all)

        # The body becomes supporting rules, so its bindings stay local:
        # a later sibling must not see them as bound.
        with scope.nested():
            scope.register(instruction)
            translation_of_body = self.translate(Not(all_.pattern))

        head = DatalogHead(self.session.fresh_predicate_name(), labels_inters + vars_inters)

        if not translation_of_body:
            logger.warning(f"Negated body of {all_} produced no alternatives; {head.name} is never derivable")

        for body in translation_of_body:
            self.session.add_supporting_rule(DatalogRule(head, prepend(body, instruction)))

        logger.debug(
            f"Synthesized {head} for universal over {instruction.opcode} "
            f"({len(translation_of_body)} alternative bodies)"
        )

        return [singleton(head.as_literal(positive=False))]
