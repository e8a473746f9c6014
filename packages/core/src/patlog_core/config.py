"""
Translator Configuration
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TranslatorConfig:
    """Configuration for the pattern to Datalog translator"""

    # Naming of synthesized identifiers
    aux_predicate_prefix: str = "tmpPred"
    fresh_label_prefix: str = "lDC"

    # Bound on formula nesting (None = unbounded)
    max_depth: Optional[int] = None
