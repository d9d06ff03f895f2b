"""
Node builders: package re-exports

Public API:
  NodeBuilder, apply, neg, pos, abs, fact, add, sub, mul, implicit_mul, div, pow,
  nth_root, eq, ne, lt, le, gt, ge, identifier, number, parens
"""

from .builders import (
	NodeBuilder,
	apply, neg, pos, abs, fact, add, sub, mul, implicit_mul, div, pow, nth_root,
	eq, ne, lt, le, gt, ge,
	identifier, number, parens,
)

__all__ = [
	"NodeBuilder",
	"apply", "neg", "pos", "abs", "fact", "add", "sub", "mul", "implicit_mul", "div", "pow", "nth_root",
	"eq", "ne", "lt", "le", "gt", "ge",
	"identifier", "number", "parens",
]
