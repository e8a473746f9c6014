"""
Datalog output representation: literals, heads, bodies, rules, and the
helpers used to assemble them.
"""

from .types import Literal, DatalogHead, DatalogBody, DatalogRule
from .bodies import as_literal, singleton, merge, prepend, collapse_bodies
from .naming import NameGenerator, encode_base26
from .models import TermModel, LiteralModel, HeadModel, RuleModel, RuleSetModel

__all__ = [
    # Types
    "Literal",
    "DatalogHead",
    "DatalogBody",
    "DatalogRule",
    # Body assembly
    "as_literal",
    "singleton",
    "merge",
    "prepend",
    "collapse_bodies",
    # Naming
    "NameGenerator",
    "encode_base26",
    # Export models
    "TermModel",
    "LiteralModel",
    "HeadModel",
    "RuleModel",
    "RuleSetModel",
]
