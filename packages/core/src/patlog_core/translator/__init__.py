"""
Pattern to Datalog translation.
"""

from .scope import ScopeTracker
from .session import TranslationSession
from .patterns import PatternTranslator
from .rules import DatalogTranslator, default_translator, translate, reset_name_generator

__all__ = [
    "ScopeTracker",
    "TranslationSession",
    "PatternTranslator",
    "DatalogTranslator",
    "default_translator",
    "translate",
    "reset_name_generator",
]
