"""
patlog Core - Translates quantified instruction patterns into stratified Datalog rules
"""

from .terms import Label, FreshLabel, PlaceholderLabel, Variable, Term, render_term
from .errors import TranslationError, InvalidPatternError, UnsupportedPatternError, PatternDepthError
from .config import TranslatorConfig
from .datalog import (
    Literal,
    DatalogHead,
    DatalogBody,
    DatalogRule,
    singleton,
    merge,
    prepend,
    collapse_bodies,
    NameGenerator,
    RuleSetModel,
)
from .dsl import (
    Instruction,
    Pattern,
    Atom,
    Not,
    And,
    Or,
    Implies,
    Some,
    All,
)
from .translator import (
    ScopeTracker,
    TranslationSession,
    PatternTranslator,
    DatalogTranslator,
    translate,
    reset_name_generator,
)
from .verify import GroundEncoder, TranslationVerifier, VerificationResult

__all__ = [
    # Terms
    'Label',
    'FreshLabel',
    'PlaceholderLabel',
    'Variable',
    'Term',
    'render_term',
    # Errors
    'TranslationError',
    'InvalidPatternError',
    'UnsupportedPatternError',
    'PatternDepthError',
    # Config
    'TranslatorConfig',
    # Datalog
    'Literal',
    'DatalogHead',
    'DatalogBody',
    'DatalogRule',
    'singleton',
    'merge',
    'prepend',
    'collapse_bodies',
    'NameGenerator',
    'RuleSetModel',
    # Patterns
    'Instruction',
    'Pattern',
    'Atom',
    'Not',
    'And',
    'Or',
    'Implies',
    'Some',
    'All',
    # Translation
    'ScopeTracker',
    'TranslationSession',
    'PatternTranslator',
    'DatalogTranslator',
    'translate',
    'reset_name_generator',
    # Verification
    'GroundEncoder',
    'TranslationVerifier',
    'VerificationResult',
]
