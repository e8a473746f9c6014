"""
Z3-backed verification of translated rule sets.
"""

from .z3_encoder import GroundEncoder
from .equivalence import TranslationVerifier, VerificationResult

__all__ = [
    "GroundEncoder",
    "TranslationVerifier",
    "VerificationResult",
]
