"""
Body assembly primitives.

A translation result is a list of alternative bodies (a disjunction of
conjunctions). An empty list acts as the identity for `collapse_bodies`.
"""

from typing import List

from .types import DatalogBody, Literal


def as_literal(element) -> Literal:
    """Accept a Literal, or anything exposing `to_literal()` (Atom, Instruction)."""
    if isinstance(element, Literal):
        return element
    return element.to_literal()


def singleton(element) -> DatalogBody:
    return DatalogBody([as_literal(element)])


def merge(first: DatalogBody, second: DatalogBody) -> DatalogBody:
    """Conjunction of two bodies; `first`'s literals come first. Inputs are left untouched."""
    return DatalogBody(first.literals + second.literals)


def prepend(body: DatalogBody, element) -> DatalogBody:
    return body.prepend(as_literal(element))


def collapse_bodies(old_bodies: List[DatalogBody], to_be_added: List[DatalogBody]) -> List[DatalogBody]:
    """
    Conjoin two lists of alternative bodies.

    If either side is empty the other is returned unchanged; otherwise the
    result is the cross product, so that AND distributes over the
    alternatives an inner OR produced.

    Args:
        old_bodies: the bodies accumulated so far
        to_be_added: the bodies of the next conjunct

    Returns:
        A new list of bodies
    """
    if not old_bodies:
        return list(to_be_added)
    if not to_be_added:
        return list(old_bodies)

    return [merge(body, added) for body in old_bodies for added in to_be_added]
