"""
Input representation: instructions and the pattern formula tree.
"""

from .types import Instruction
from .patterns import (
    Pattern,
    Atom,
    Not,
    And,
    Or,
    Implies,
    Some,
    All,
)

__all__ = [
    "Instruction",
    "Pattern",
    "Atom",
    "Not",
    "And",
    "Or",
    "Implies",
    "Some",
    "All",
]
