"""
Scope tracking for one translation session.

Records every label and variable bound so far. Registrations are shared
by all recursive calls of a session, so whatever a sibling formula bound
earlier is visible when a later universal quantifier decides which
identifiers to pass to its auxiliary predicate. Bindings made under a
universal quantifier live in a nested scope and are dropped when the
quantifier has been translated.
"""

from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List

from ..terms import Label, Variable


class ScopeTracker:
    """Insertion-ordered sets of encountered labels and variables."""

    def __init__(self):
        # dicts keep insertion order, which fixes auxiliary parameter order
        self._labels: Dict[Label, None] = {}
        self._variables: Dict[Variable, None] = {}

    @property
    def encountered_labels(self) -> List[Label]:
        return list(self._labels)

    @property
    def encountered_variables(self) -> List[Variable]:
        return list(self._variables)

    def register(self, element) -> None:
        """
        Register the labels and variables of an Atom or Instruction.

        Arguments are visited in order; placeholders and constants are
        skipped.
        """
        for term in element.to_literal().args:
            if isinstance(term, Label):
                self._labels.setdefault(term, None)
            elif isinstance(term, Variable):
                self._variables.setdefault(term, None)

    def bound_labels(self, candidates: Iterable[Label]) -> List[Label]:
        """Candidates already encountered, in encounter order."""
        wanted = set(candidates)
        return [label for label in self._labels if label in wanted]

    def bound_variables(self, candidates: Iterable[Variable]) -> List[Variable]:
        """Candidates already encountered, in encounter order."""
        wanted = set(candidates)
        return [var for var in self._variables if var in wanted]

    @contextmanager
    def nested(self) -> Iterator["ScopeTracker"]:
        """
        Open a nested scope for the body of a universal quantifier.

        The body is compiled into separate supporting rules, so nothing it
        binds is bound in the enclosing rule. Registrations made inside the
        block are forgotten on exit.
        """
        labels, variables = dict(self._labels), dict(self._variables)
        try:
            yield self
        finally:
            self._labels, self._variables = labels, variables

    def __repr__(self):
        return f"ScopeTracker(labels={self.encountered_labels}, variables={self.encountered_variables})"
