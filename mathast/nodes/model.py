"""
Immutable node variants for math-expression syntax trees.

Variants:
  • Number(value)                      — numeral kept as its exact source text
  • Identifier(name, subscript)        — symbolic variable
  • Apply(op, args, implicit, was_minus) — operator or function application
  • Parentheses(body)                  — explicit grouping

Apply.op is a string tag for operators (add, mul, div, pow, neg, pos, abs, fact,
nthRoot, eq, ne, lt, le, gt, ge) and an Identifier for function calls.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union


class NodeError(ValueError):
	"""Raised when a node is constructed with the wrong arity for its operator."""


UNARY_OPS = frozenset({"neg", "pos", "abs", "fact"})
BINARY_OPS = frozenset({"div", "pow"})

RELATION_SYMBOLS = {
	"eq": "=",
	"lt": "<",
	"le": "<=",
	"gt": ">",
	"ge": ">=",
	"ne": "!=",
}


@dataclass(frozen=True)
class Number:
	"""Numeric literal; value is the source text, never a float."""
	value: str

	def __post_init__(self) -> None:
		if not isinstance(self.value, str):
			object.__setattr__(self, "value", str(self.value))


@dataclass(frozen=True)
class Identifier:
	"""Symbolic variable with an optional subscript node."""
	name: str
	subscript: Optional["Node"] = None


@dataclass(frozen=True)
class Apply:
	"""
	Operator application. `implicit` marks a mul written without an operator
	(2x); `was_minus` marks a neg that came from textual subtraction (a - b).
	"""
	op: Union[str, Identifier]
	args: Tuple["Node", ...] = ()
	implicit: bool = False
	was_minus: bool = False

	def __post_init__(self) -> None:
		if not isinstance(self.args, tuple):
			object.__setattr__(self, "args", tuple(self.args))
		n = len(self.args)
		if self.op in UNARY_OPS and n != 1:
			raise NodeError(f"{self.op} takes exactly 1 argument, got {n}")
		if self.op in BINARY_OPS and n != 2:
			raise NodeError(f"{self.op} takes exactly 2 arguments, got {n}")
		if self.op == "nthRoot" and n not in (1, 2):
			raise NodeError(f"nthRoot takes 1 or 2 arguments, got {n}")
		if self.op in ("add", "mul") and n < 1:
			raise NodeError(f"{self.op} needs at least 1 argument")


@dataclass(frozen=True)
class Parentheses:
	"""Explicit grouping around a single body node."""
	body: "Node"


Node = Union[Number, Identifier, Apply, Parentheses]
