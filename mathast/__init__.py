"""
Structural queries and builders for math-expression syntax trees.

Subpackages:
  mathast.nodes    — Number, Identifier, Apply, Parentheses
  mathast.build    — node factories (sub, implicit_mul, nth_root, relations, ...)
  mathast.query    — predicates, polynomial grammar, term decomposition
  mathast.sign     — canonical negation
  mathast.printer  — default deterministic text printer
  mathast.io       — SymPy bridge
"""

from . import build, query
from .nodes import Number, Identifier, Apply, Parentheses, Node, NodeError
from .printer import TextPrinter, PrintConfig, print_node
from .query import TermGroups
from .sign import negate

__all__ = [
	"build", "query",
	"Number", "Identifier", "Apply", "Parentheses", "Node", "NodeError",
	"TextPrinter", "PrintConfig", "print_node",
	"TermGroups", "negate",
]
