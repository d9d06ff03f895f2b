"""
Pure factory functions for canonical nodes.

Provides:
  • NodeBuilder.apply(op, args, implicit, was_minus): base constructor
  • Operations: neg, pos, abs, fact, add, sub, mul, implicit_mul, div, pow, nth_root
  • Relations:  eq, ne, lt, le, gt, ge
  • Leaves:     identifier, number, parens

Subtraction is not an operator of its own: sub(a, b) is add(a, neg(b, was_minus=True)).

Module-level functions proxy to NodeBuilder methods for ergonomic imports.
"""

from __future__ import annotations
from typing import Iterable, Optional, Union

from mathast.nodes import Apply, Identifier, Node, Number, Parentheses


class NodeBuilder:
	"""Namespace of node factories; every method returns a fresh node."""

	@staticmethod
	def apply(
		op: Union[str, Identifier],
		args: Iterable[Node],
		implicit: bool = False,
		was_minus: bool = False,
	) -> Apply:
		"""Build an Apply node, merging the optional flags onto it."""
		return Apply(op, tuple(args), implicit=implicit, was_minus=was_minus)

	# Operations

	@staticmethod
	def neg(arg: Node, was_minus: bool = False) -> Apply:
		return NodeBuilder.apply("neg", [arg], was_minus=was_minus)

	@staticmethod
	def pos(arg: Node) -> Apply:
		return NodeBuilder.apply("pos", [arg])

	@staticmethod
	def abs(arg: Node) -> Apply:
		return NodeBuilder.apply("abs", [arg])

	@staticmethod
	def fact(arg: Node) -> Apply:
		return NodeBuilder.apply("fact", [arg])

	@staticmethod
	def add(*terms: Node) -> Apply:
		return NodeBuilder.apply("add", terms)

	@staticmethod
	def sub(minuend: Node, subtrahend: Node) -> Apply:
		"""a - b, encoded as a + neg(b) with the neg flagged was_minus."""
		return NodeBuilder.apply("add", [minuend, NodeBuilder.neg(subtrahend, was_minus=True)])

	@staticmethod
	def mul(*args: Node) -> Apply:
		return NodeBuilder.apply("mul", args)

	@staticmethod
	def implicit_mul(*args: Node) -> Apply:
		return NodeBuilder.apply("mul", args, implicit=True)

	@staticmethod
	def div(numerator: Node, denominator: Node) -> Apply:
		return NodeBuilder.apply("div", [numerator, denominator])

	@staticmethod
	def pow(base: Node, exponent: Node) -> Apply:
		return NodeBuilder.apply("pow", [base, exponent])

	@staticmethod
	def nth_root(radicand: Node, index: Optional[Node] = None) -> Apply:
		"""nthRoot with the index materialized; a missing index means square root."""
		return NodeBuilder.apply("nthRoot", [radicand, index or NodeBuilder.number("2")])

	# Relations

	@staticmethod
	def eq(*args: Node) -> Apply:
		return NodeBuilder.apply("eq", args)

	@staticmethod
	def ne(*args: Node) -> Apply:
		return NodeBuilder.apply("ne", args)

	@staticmethod
	def lt(*args: Node) -> Apply:
		return NodeBuilder.apply("lt", args)

	@staticmethod
	def le(*args: Node) -> Apply:
		return NodeBuilder.apply("le", args)

	@staticmethod
	def gt(*args: Node) -> Apply:
		return NodeBuilder.apply("gt", args)

	@staticmethod
	def ge(*args: Node) -> Apply:
		return NodeBuilder.apply("ge", args)

	# Leaves

	@staticmethod
	def identifier(name: str, subscript: Optional[Node] = None) -> Identifier:
		return Identifier(name, subscript=subscript)

	@staticmethod
	def number(value) -> Number:
		"""Numeric literal; the value is stored as str(value)."""
		return Number(str(value))

	@staticmethod
	def parens(body: Node) -> Parentheses:
		return Parentheses(body)


apply = NodeBuilder.apply
neg = NodeBuilder.neg
pos = NodeBuilder.pos
abs = NodeBuilder.abs
fact = NodeBuilder.fact
add = NodeBuilder.add
sub = NodeBuilder.sub
mul = NodeBuilder.mul
implicit_mul = NodeBuilder.implicit_mul
div = NodeBuilder.div
pow = NodeBuilder.pow
nth_root = NodeBuilder.nth_root

eq = NodeBuilder.eq
ne = NodeBuilder.ne
lt = NodeBuilder.lt
le = NodeBuilder.le
gt = NodeBuilder.gt
ge = NodeBuilder.ge

identifier = NodeBuilder.identifier
number = NodeBuilder.number
parens = NodeBuilder.parens
