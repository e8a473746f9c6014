"""
Pattern Types.

A pattern is a formula over instructions and primitive literals. The set
of node types is closed: Atom, Not, And, Or, Implies, Some and All. Trees
are immutable once built.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Set

from ..terms import Label, Term, Variable, labels_in, variables_in
from ..datalog.types import Literal
from .types import Instruction


class Pattern(ABC):
    """
    Base class for patterns.

    Every pattern reports the labels and variables referenced anywhere in
    its subtree, quantified instructions included.
    """

    @abstractmethod
    def labels(self) -> Set[Label]:
        """Return set of concrete labels in this pattern."""
        pass

    @abstractmethod
    def variables(self) -> Set[Variable]:
        """Return set of variables in this pattern."""
        pass


@dataclass(frozen=True)
class Atom(Pattern):
    """
    A primitive literal that Datalog can express directly.

    Examples:
    - Atom("mayDependOn", [Variable("x"), "Caller"])
    - Atom("mustPrecede", [Label("L1"), Label("L2")])
    """
    predicate: str
    args: tuple

    def __init__(self, predicate: str, args: Iterable[Term] = ()):
        object.__setattr__(self, 'predicate', predicate)
        object.__setattr__(self, 'args', tuple(args))

    def labels(self) -> Set[Label]:
        return set(labels_in(self.args))

    def variables(self) -> Set[Variable]:
        return set(variables_in(self.args))

    def to_literal(self) -> Literal:
        return Literal(self.predicate, self.args)

    def __repr__(self):
        return repr(self.to_literal())


@dataclass(frozen=True)
class Not(Pattern):
    """
    Negation: ¬φ.
    """
    pattern: Pattern

    def labels(self) -> Set[Label]:
        return self.pattern.labels()

    def variables(self) -> Set[Variable]:
        return self.pattern.variables()

    def __repr__(self):
        return f"¬({self.pattern})"


@dataclass(frozen=True)
class And(Pattern):
    """
    Conjunction: φ1 ∧ φ2 ∧ ... ∧ φn.
    """
    patterns: tuple

    def __init__(self, patterns: Iterable[Pattern]):
        object.__setattr__(self, 'patterns', tuple(patterns))

    def labels(self) -> Set[Label]:
        result = set()
        for p in self.patterns:
            result |= p.labels()
        return result

    def variables(self) -> Set[Variable]:
        result = set()
        for p in self.patterns:
            result |= p.variables()
        return result

    def __repr__(self):
        if not self.patterns:
            return "⊤"
        return " ∧ ".join(f"({p})" for p in self.patterns)


@dataclass(frozen=True)
class Or(Pattern):
    """
    Disjunction: φ1 ∨ φ2 ∨ ... ∨ φn.
    """
    patterns: tuple

    def __init__(self, patterns: Iterable[Pattern]):
        object.__setattr__(self, 'patterns', tuple(patterns))

    def labels(self) -> Set[Label]:
        result = set()
        for p in self.patterns:
            result |= p.labels()
        return result

    def variables(self) -> Set[Variable]:
        result = set()
        for p in self.patterns:
            result |= p.variables()
        return result

    def __repr__(self):
        if not self.patterns:
            return "⊥"
        return " ∨ ".join(f"({p})" for p in self.patterns)


@dataclass(frozen=True)
class Implies(Pattern):
    """
    Implication: φ → ψ.
    """
    lhs: Pattern
    rhs: Pattern

    def labels(self) -> Set[Label]:
        return self.lhs.labels() | self.rhs.labels()

    def variables(self) -> Set[Variable]:
        return self.lhs.variables() | self.rhs.variables()

    def __repr__(self):
        return f"({self.lhs}) → ({self.rhs})"


@dataclass(frozen=True)
class Some(Pattern):
    """
    Existential quantification: some instruction matching `instruction`
    satisfies `pattern`.
    """
    instruction: Instruction
    pattern: Pattern

    def labels(self) -> Set[Label]:
        return self.instruction.all_labels() | self.pattern.labels()

    def variables(self) -> Set[Variable]:
        return self.instruction.all_variables() | self.pattern.variables()

    def __repr__(self):
        return f"∃{self.instruction}. ({self.pattern})"


@dataclass(frozen=True)
class All(Pattern):
    """
    Universal quantification: every instruction matching `instruction`
    satisfies `pattern`.
    """
    instruction: Instruction
    pattern: Pattern

    def labels(self) -> Set[Label]:
        return self.instruction.all_labels() | self.pattern.labels()

    def variables(self) -> Set[Variable]:
        return self.instruction.all_variables() | self.pattern.variables()

    def __repr__(self):
        return f"∀{self.instruction}. ({self.pattern})"

