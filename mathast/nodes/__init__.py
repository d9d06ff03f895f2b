"""
Node model: the tagged tree every other component reads.

Public API:
  Number, Identifier, Apply, Parentheses, Node, NodeError, RELATION_SYMBOLS
"""

from .model import Number, Identifier, Apply, Parentheses, Node, NodeError, RELATION_SYMBOLS

__all__ = ["Number", "Identifier", "Apply", "Parentheses", "Node", "NodeError", "RELATION_SYMBOLS"]
