"""
Pydantic models of translated rule sets.

These are the serializable form of the translator output, handed to
whatever renders the rules into a concrete Datalog dialect or feeds them
to a solver.
"""

from typing import Any, List

from pydantic import BaseModel, field_validator

from ..terms import Label, PlaceholderLabel, Variable
from .types import DatalogHead, DatalogRule, Literal

TERM_KINDS = ("label", "variable", "constant", "placeholder")


class TermModel(BaseModel):
    """A literal argument or head parameter."""
    kind: str
    value: str

    @field_validator('kind')
    @classmethod
    def check_kind(cls, v: str) -> str:
        if v not in TERM_KINDS:
            raise ValueError(f"Unknown term kind '{v}', expected one of {TERM_KINDS}")
        return v

    @classmethod
    def from_term(cls, term: Any) -> 'TermModel':
        if isinstance(term, Label):
            return cls(kind="label", value=term.name)
        if isinstance(term, Variable):
            return cls(kind="variable", value=term.name)
        if isinstance(term, PlaceholderLabel):
            return cls(kind="placeholder", value="_")
        return cls(kind="constant", value=str(term))


class LiteralModel(BaseModel):
    predicate: str
    positive: bool = True
    args: List[TermModel] = []

    @classmethod
    def from_literal(cls, literal: Literal) -> 'LiteralModel':
        return cls(
            predicate=literal.predicate,
            positive=literal.positive,
            args=[TermModel.from_term(a) for a in literal.args]
        )


class HeadModel(BaseModel):
    name: str
    params: List[TermModel] = []

    @classmethod
    def from_head(cls, head: DatalogHead) -> 'HeadModel':
        return cls(name=head.name, params=[TermModel.from_term(p) for p in head.params])


class RuleModel(BaseModel):
    """A rule in the exported rule set."""
    head: HeadModel
    body: List[LiteralModel] = []

    @classmethod
    def from_rule(cls, rule: DatalogRule) -> 'RuleModel':
        return cls(
            head=HeadModel.from_head(rule.head),
            body=[LiteralModel.from_literal(lit) for lit in rule.body]
        )


class RuleSetModel(BaseModel):
    """
    The full output of one translation.

    `name` is the rule name requested by the caller; every other head
    is an auxiliary predicate synthesized for a universal quantifier.
    """
    name: str
    rules: List[RuleModel] = []

    @classmethod
    def from_rules(cls, name: str, rules: List[DatalogRule]) -> 'RuleSetModel':
        return cls(name=name, rules=[RuleModel.from_rule(r) for r in rules])

    def main_rules(self) -> List[RuleModel]:
        return [r for r in self.rules if r.head.name == self.name]

    def auxiliary_predicates(self) -> List[str]:
        """Auxiliary predicate names, in order of first definition."""
        names: List[str] = []
        for rule in self.rules:
            if rule.head.name != self.name and rule.head.name not in names:
                names.append(rule.head.name)
        return names
