"""
Instructions: the range of a quantifier.

An instruction is an operation at a program point (its label) referencing
zero or more operands. It is produced by the program-analysis front end
and appears in patterns only as the subject of `Some` or `All`.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Set, Union

from ..terms import Label, PlaceholderLabel, Term, Variable, labels_in, variables_in
from ..datalog.types import Literal


@dataclass(frozen=True)
class Instruction:
    """
    An operation `opcode` at `label` with ordered operands.

    Examples:
    - Instruction("call", Label("L0"), [Variable("target")])
    - Instruction("sstore", PlaceholderLabel(), [Variable("slot"), Variable("value")])
    """
    opcode: str
    label: Union[Label, PlaceholderLabel]
    args: tuple  # Using tuple for hashability

    def __init__(self, opcode: str, label: Union[Label, PlaceholderLabel], args: Iterable[Term] = ()):
        object.__setattr__(self, 'opcode', opcode)
        object.__setattr__(self, 'label', label)
        object.__setattr__(self, 'args', tuple(args))

    def has_placeholder_label(self) -> bool:
        return isinstance(self.label, PlaceholderLabel)

    def with_label(self, label: Label) -> 'Instruction':
        """A copy of this instruction at `label`; the original is left as is."""
        return replace(self, label=label)

    def all_labels(self) -> Set[Label]:
        """Its own label (unless a placeholder) and any label operands."""
        return set(labels_in((self.label,) + self.args))

    def all_variables(self) -> Set[Variable]:
        return set(variables_in(self.args))

    def to_literal(self) -> Literal:
        """The positive literal `opcode(label, args...)`."""
        return Literal(self.opcode, (self.label,) + self.args)

    def __repr__(self):
        return repr(self.to_literal())
