"""
Shape predicates over math-expression nodes.

Provides:
  • Variant checks: is_identifier, is_apply, is_parens, is_function, is_operation
  • Operator checks: is_add, is_mul, is_div, is_pow, is_neg, is_pos, is_abs, is_fact, is_nth_root
  • Numeric kinds: is_number, is_integer, is_decimal, is_fraction, is_constant_fraction,
    is_integer_fraction
  • Relations and styling: is_rel, is_implicit
  • Accessors: get_value, get_numerator, get_denominator

All predicates are total: they return False (accessors return None) on shapes they do
not recognize, including None input. Negation is peeled one layer per recursive call.

Module-level functions proxy to NodeQuery methods for compatibility.
"""

from __future__ import annotations
from typing import Optional
import sympy as sp

from mathast.nodes import Apply, Identifier, Node, Number, Parentheses, RELATION_SYMBOLS


class NodeQuery:
	"""Namespace of structural classifiers and accessors."""

	@staticmethod
	def is_identifier(node: Optional[Node]) -> bool:
		return isinstance(node, Identifier)

	@staticmethod
	def is_apply(node: Optional[Node]) -> bool:
		return isinstance(node, Apply)

	@staticmethod
	def is_parens(node: Optional[Node]) -> bool:
		return isinstance(node, Parentheses)

	@staticmethod
	def is_operation(node: Optional[Node]) -> bool:
		"""Deprecated: an Apply that is not a (possibly negated) number. Use is_apply."""
		return NodeQuery.is_apply(node) and not NodeQuery.is_number(node)

	@staticmethod
	def is_function(node: Optional[Node]) -> bool:
		"""Function call such as sin(x): an Apply whose op is an Identifier."""
		return NodeQuery.is_apply(node) and NodeQuery.is_identifier(node.op)

	@staticmethod
	def _is_op(op: str, node: Optional[Node]) -> bool:
		return NodeQuery.is_apply(node) and node.op == op

	@staticmethod
	def is_add(node: Optional[Node]) -> bool:
		return NodeQuery._is_op("add", node)

	@staticmethod
	def is_mul(node: Optional[Node]) -> bool:
		return NodeQuery._is_op("mul", node)

	@staticmethod
	def is_div(node: Optional[Node]) -> bool:
		return NodeQuery._is_op("div", node)

	@staticmethod
	def is_pow(node: Optional[Node]) -> bool:
		return NodeQuery._is_op("pow", node)

	@staticmethod
	def is_neg(node: Optional[Node]) -> bool:
		return NodeQuery._is_op("neg", node)

	@staticmethod
	def is_pos(node: Optional[Node]) -> bool:
		return NodeQuery._is_op("pos", node)

	@staticmethod
	def is_abs(node: Optional[Node]) -> bool:
		return NodeQuery._is_op("abs", node)

	@staticmethod
	def is_fact(node: Optional[Node]) -> bool:
		return NodeQuery._is_op("fact", node)

	@staticmethod
	def is_nth_root(node: Optional[Node]) -> bool:
		return NodeQuery._is_op("nthRoot", node)

	@staticmethod
	def is_rel(node: Optional[Node]) -> bool:
		return NodeQuery.is_apply(node) and isinstance(node.op, str) and node.op in RELATION_SYMBOLS

	@staticmethod
	def is_number(node: Optional[Node]) -> bool:
		"""
		True for Number nodes and for neg-wrapped numbers (-5). A pos-wrapped number
		is not a number here, even though get_value reads through pos.
		"""
		if isinstance(node, Number):
			return True
		elif NodeQuery.is_neg(node):
			return NodeQuery.is_number(node.args[0])
		else:
			return False

	@staticmethod
	def _exact_value(node: Optional[Node]) -> Optional[sp.Rational]:
		"""Exact rational value of a numeral, read through neg and pos; None if unreadable."""
		if isinstance(node, Number):
			try:
				return sp.Rational(node.value)
			except (TypeError, ValueError):
				return None
		elif NodeQuery.is_neg(node):
			inner = NodeQuery._exact_value(node.args[0])
			if inner is None:
				return None
			return -inner
		elif NodeQuery.is_pos(node):
			return NodeQuery._exact_value(node.args[0])
		else:
			return None

	@staticmethod
	def is_integer(node: Optional[Node]) -> bool:
		"""A number whose numeral has no fractional part (2 and 2.0, not 2.5)."""
		if not NodeQuery.is_number(node):
			return False
		exact = NodeQuery._exact_value(node)
		return exact is not None and exact.q == 1

	@staticmethod
	def is_decimal(node: Optional[Node]) -> bool:
		"""A number whose value modulo 1 is nonzero."""
		if not NodeQuery.is_number(node):
			return False
		exact = NodeQuery._exact_value(node)
		return exact is not None and exact % 1 != 0

	@staticmethod
	def is_fraction(node: Optional[Node]) -> bool:
		"""A div, or a neg wrapping a fraction; sign does not break fraction-ness."""
		if NodeQuery.is_neg(node):
			return NodeQuery.is_fraction(node.args[0])
		return NodeQuery.is_div(node)

	@staticmethod
	def is_constant_fraction(node: Optional[Node]) -> bool:
		if not NodeQuery.is_fraction(node):
			return False
		for arg in node.args:
			if not NodeQuery.is_number(arg):
				return False
		return True

	@staticmethod
	def is_integer_fraction(node: Optional[Node]) -> bool:
		if not NodeQuery.is_fraction(node):
			return False
		for arg in node.args:
			if not NodeQuery.is_integer(arg):
				return False
		return True

	@staticmethod
	def is_implicit(node: Optional[Node]) -> bool:
		"""An implicit mul (2x), possibly under negation."""
		if NodeQuery.is_mul(node):
			return node.implicit
		elif NodeQuery.is_neg(node):
			return NodeQuery.is_implicit(node.args[0])
		else:
			return False

	@staticmethod
	def get_value(node: Optional[Node]) -> Optional[float]:
		"""Float value of a number, read through neg and pos; None for anything else, including unreadable numerals."""
		exact = NodeQuery._exact_value(node)
		if exact is None:
			return None
		return float(exact)

	@staticmethod
	def get_numerator(node: Optional[Node]) -> Optional[Node]:
		"""Numerator of a fraction, peeling any negation around the div."""
		if not NodeQuery.is_fraction(node):
			return None
		if NodeQuery.is_neg(node):
			return NodeQuery.get_numerator(node.args[0])
		return node.args[0]

	@staticmethod
	def get_denominator(node: Optional[Node]) -> Optional[Node]:
		"""Denominator of a fraction, peeling any negation around the div."""
		if not NodeQuery.is_fraction(node):
			return None
		if NodeQuery.is_neg(node):
			return NodeQuery.get_denominator(node.args[0])
		return node.args[1]


is_identifier = NodeQuery.is_identifier
is_apply = NodeQuery.is_apply
is_parens = NodeQuery.is_parens
is_operation = NodeQuery.is_operation
is_function = NodeQuery.is_function
is_add = NodeQuery.is_add
is_mul = NodeQuery.is_mul
is_div = NodeQuery.is_div
is_pow = NodeQuery.is_pow
is_neg = NodeQuery.is_neg
is_pos = NodeQuery.is_pos
is_abs = NodeQuery.is_abs
is_fact = NodeQuery.is_fact
is_nth_root = NodeQuery.is_nth_root
is_rel = NodeQuery.is_rel
is_number = NodeQuery.is_number
is_integer = NodeQuery.is_integer
is_decimal = NodeQuery.is_decimal
is_fraction = NodeQuery.is_fraction
is_constant_fraction = NodeQuery.is_constant_fraction
is_integer_fraction = NodeQuery.is_integer_fraction
is_implicit = NodeQuery.is_implicit
get_value = NodeQuery.get_value
get_numerator = NodeQuery.get_numerator
get_denominator = NodeQuery.get_denominator
