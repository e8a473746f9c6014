"""
Translation session: the mutable state of one top-level translation.
"""

import logging
from typing import Collection, List, Optional

from ..config import TranslatorConfig
from ..datalog.naming import NameGenerator
from ..datalog.types import DatalogRule
from ..dsl.types import Instruction
from ..errors import PatternDepthError
from .scope import ScopeTracker

logger = logging.getLogger(__name__)


class TranslationSession:
    """
    State threaded through every recursive step of one translation.

    Holds the scope tracker, the supporting rules discovered so far (in
    discovery order, never removed) and the current nesting depth. The
    name generator is borrowed from the translator that opened the
    session and outlives it.

    A session must not be reused across translations or shared between
    threads.
    """

    def __init__(
        self,
        name_generator: NameGenerator,
        config: Optional[TranslatorConfig] = None,
        reserved_labels: Collection[str] = (),
    ):
        self.config = config or TranslatorConfig()
        self.names = name_generator
        # label names written by the user; fresh labels never reuse them
        self.reserved_labels = frozenset(reserved_labels)
        self.scope = ScopeTracker()
        self.supporting_rules: List[DatalogRule] = []
        self.depth = 0

    def add_supporting_rule(self, rule: DatalogRule) -> None:
        self.supporting_rules.append(rule)

    def fresh_predicate_name(self) -> str:
        return self.names.next_predicate_name()

    def resolve_label(self, instruction: Instruction) -> Instruction:
        """Replace a placeholder label with a fresh one, on a copy."""
        if not instruction.has_placeholder_label():
            return instruction
        resolved = instruction.with_label(self.names.next_label(self.reserved_labels))
        logger.debug(f"Resolved placeholder label of {instruction.opcode} to {resolved.label}")
        return resolved

    def enter(self) -> None:
        self.depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth > max_depth:
            raise PatternDepthError(max_depth)

    def leave(self) -> None:
        self.depth -= 1
