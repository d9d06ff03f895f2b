"""
Sign normalization: package re-exports

Public API:
  SignNormalizer, negate
"""

from .normalizer import SignNormalizer, negate

__all__ = ["SignNormalizer", "negate"]
