"""
Datalog Types.

The output side of the translator: literals, rule heads, conjunctive
bodies and rules. These are dialect-agnostic; rendering them to a
concrete Datalog syntax is left to the consumer.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from ..terms import Term, render_term


@dataclass(frozen=True)
class Literal:
    """
    A (possibly negated) predicate application.

    Examples:
    - Literal("assign", (Label("L1"), Variable("x")))
    - Literal("tmpPredA", (), positive=False)
    """
    predicate: str
    args: tuple  # Using tuple for hashability
    positive: bool = True

    def __init__(self, predicate: str, args: Iterable[Term] = (), positive: bool = True):
        object.__setattr__(self, 'predicate', predicate)
        object.__setattr__(self, 'args', tuple(args))
        object.__setattr__(self, 'positive', positive)

    def negate(self) -> 'Literal':
        return Literal(self.predicate, self.args, not self.positive)

    def to_literal(self) -> 'Literal':
        return self

    def key(self) -> str:
        """Rendering of the positive form, identifying the predicate application."""
        args_str = ", ".join(render_term(a) for a in self.args)
        return f"{self.predicate}({args_str})"

    def __repr__(self):
        if self.positive:
            return self.key()
        return f"!{self.key()}"


@dataclass(frozen=True)
class DatalogHead:
    """
    Head of a rule: predicate name and ordered parameters.

    Parameters list labels first, then variables.
    """
    name: str
    params: tuple

    def __init__(self, name: str, params: Iterable[Term] = ()):
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'params', tuple(params))

    def as_literal(self, positive: bool = True) -> Literal:
        """The application of this head's predicate to its own parameters."""
        return Literal(self.name, self.params, positive)

    def key(self) -> str:
        return self.as_literal().key()

    def __repr__(self):
        return self.key()


@dataclass
class DatalogBody:
    """Ordered conjunction of literals."""
    literals: List[Literal] = field(default_factory=list)

    def prepend(self, literal: Literal) -> 'DatalogBody':
        """Insert `literal` at the front. Mutates and returns this body."""
        self.literals.insert(0, literal)
        return self

    def copy(self) -> 'DatalogBody':
        return DatalogBody(list(self.literals))

    def __len__(self) -> int:
        return len(self.literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self.literals)

    def __repr__(self):
        return ", ".join(repr(lit) for lit in self.literals)


@dataclass
class DatalogRule:
    """A rule: `head` is derivable whenever every literal of `body` holds."""
    head: DatalogHead
    body: DatalogBody

    def __repr__(self):
        if not self.body.literals:
            return f"{self.head}."
        return f"{self.head} :- {self.body}."
