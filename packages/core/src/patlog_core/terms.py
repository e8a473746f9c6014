"""
Terms shared by patterns and Datalog literals.

Labels identify program points, variables identify program-level values.
Anything else appearing as an argument (strings, integers) is a constant.
"""

from dataclasses import dataclass
from typing import Iterable, List, Union


@dataclass(frozen=True)
class Label:
    """
    A concrete program point identifier.

    Labels are compared by name, so two `Label("L1")` instances denote
    the same program point.
    """
    name: str

    def __repr__(self):
        return self.name


@dataclass(frozen=True, repr=False)
class FreshLabel(Label):
    """
    A label allocated by the translator to replace a placeholder.

    Never equal to a `Label` written by the user, even one with the same
    name.
    """


@dataclass(frozen=True)
class PlaceholderLabel:
    """
    A "don't care" label.

    Placeholders cannot be bound: they never enter label sets and a
    quantified instruction carrying one gets a fresh concrete label
    before it is translated.
    """

    def __repr__(self):
        return "_"


@dataclass(frozen=True)
class Variable:
    """A program-level value referenced by instructions and predicates."""
    name: str

    def __repr__(self):
        return self.name


Term = Union[Label, PlaceholderLabel, Variable, str, int]


def render_term(term: Term) -> str:
    """Render a term the way it appears inside a literal."""
    if isinstance(term, (Label, PlaceholderLabel, Variable)):
        return repr(term)
    if isinstance(term, str):
        escaped = term.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(term)


def labels_in(terms: Iterable[Term]) -> List[Label]:
    """Concrete labels among `terms`, first occurrence order, no duplicates."""
    seen: List[Label] = []
    for term in terms:
        if isinstance(term, Label) and term not in seen:
            seen.append(term)
    return seen


def variables_in(terms: Iterable[Term]) -> List[Variable]:
    """Variables among `terms`, first occurrence order, no duplicates."""
    seen: List[Variable] = []
    for term in terms:
        if isinstance(term, Variable) and term not in seen:
            seen.append(term)
    return seen


def has_placeholder(terms: Iterable[Term]) -> bool:
    return any(isinstance(term, PlaceholderLabel) for term in terms)
