"""
Translates quantified instruction patterns into Datalog rules.

This is the entry point of the compiler. A pattern rooted at `Some` or
`All` over an instruction becomes one rule per alternative body, named
after the caller's rule and parameterized by the instruction's label,
followed by the supporting rules of every auxiliary predicate.
"""

import logging
from typing import List, Optional

from ..config import TranslatorConfig
from ..datalog.bodies import collapse_bodies, singleton
from ..datalog.naming import NameGenerator
from ..datalog.types import DatalogHead, DatalogRule
from ..dsl.patterns import All, Pattern, Some
from ..dsl.types import Instruction
from ..errors import InvalidPatternError
from .patterns import PatternTranslator
from .session import TranslationSession

logger = logging.getLogger(__name__)


class DatalogTranslator:
    """
    Translates patterns to Datalog rules.

    The translator owns a name generator that survives across calls, so
    auxiliary predicates stay unique over a whole compilation unit. Call
    `reset_name_generator()` between independent runs that must produce
    reproducible names.

    Usage:
        translator = DatalogTranslator()
        rules = translator.translate(
            Some(Instruction("call", Label("L0")), Atom("reentrant", [Label("L0")])),
            "unsafeCall",
        )
    """

    def __init__(self, config: Optional[TranslatorConfig] = None, name_generator: Optional[NameGenerator] = None):
        self.config = config or TranslatorConfig()
        self.name_generator = name_generator or NameGenerator(
            predicate_prefix=self.config.aux_predicate_prefix,
            label_prefix=self.config.fresh_label_prefix,
        )

    def reset_name_generator(self) -> None:
        """Reset naming so the next run starts again from the first name."""
        self.name_generator.reset()

    def new_session(self, pattern: Optional[Pattern] = None) -> TranslationSession:
        reserved = [label.name for label in pattern.labels()] if pattern is not None else ()
        return TranslationSession(self.name_generator, self.config, reserved)

    def translate(self, pattern: Pattern, rule_name: str) -> List[DatalogRule]:
        """
        Translate a pattern into Datalog rules.

        Args:
            pattern: a Some or All directly quantifying over an instruction
            rule_name: name of the rule being defined

        Returns:
            The rules for `rule_name`, one per alternative body, followed by
            the supporting rules in discovery order

        Raises:
            InvalidPatternError: `pattern` is not a quantified instruction pattern
        """
        if not isinstance(pattern, (Some, All)):
            raise InvalidPatternError(pattern)
        if not isinstance(pattern.instruction, Instruction):
            raise InvalidPatternError(
                pattern,
                f"The outer {type(pattern).__name__} does not quantify over an instruction"
            )

        session = self.new_session(pattern)
        logger.debug(f"Translating {rule_name}: {pattern}")

        instr = session.resolve_label(pattern.instruction)

        # the rule is parameterized by the label of the quantified instruction
        head = DatalogHead(rule_name, [instr.label])
        session.scope.register(instr)

        new_bodies = collapse_bodies(
            [singleton(instr)],
            PatternTranslator(session).translate(pattern.pattern)
        )

        translated_rules = [DatalogRule(head, body) for body in new_bodies]
        translated_rules.extend(session.supporting_rules)

        logger.debug(
            f"Translated {rule_name} into {len(new_bodies)} rules "
            f"and {len(session.supporting_rules)} supporting rules"
        )
        return translated_rules


_default_translator = DatalogTranslator()


def default_translator() -> DatalogTranslator:
    """The process-wide translator behind `translate` and `reset_name_generator`."""
    return _default_translator


def translate(pattern: Pattern, rule_name: str) -> List[DatalogRule]:
    """
    Convenience function to translate a pattern with the default translator.

    Args:
        pattern: a Some or All directly quantifying over an instruction
        rule_name: name of the rule being defined

    Returns:
        List of Datalog rules
    """
    return _default_translator.translate(pattern, rule_name)


def reset_name_generator() -> None:
    """Reset the default translator's name generator."""
    _default_translator.reset_name_generator()
