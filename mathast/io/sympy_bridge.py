"""SymPy bridge: translate nodes to unevaluated SymPy expressions.

Provides:
  • SympyBridge.to_sympy(node): structural, non-evaluating translation.
  • SympyBridge.symbolic_equal(a, b): True iff simplify(a - b) == 0.

Numerals go through sympify on their exact source text, so 2.5 stays a Float and
integers stay Integer. Relations become unevaluated Relational objects.

Module-level functions proxy to SympyBridge methods for compatibility.
"""

from __future__ import annotations
from typing import Dict
import sympy as sp

from mathast.nodes import Apply, Identifier, Node, Number, Parentheses


_RELATIONS: Dict[str, type] = {
	"eq": sp.Eq,
	"ne": sp.Ne,
	"lt": sp.Lt,
	"le": sp.Le,
	"gt": sp.Gt,
	"ge": sp.Ge,
}

_FUNCTIONS: Dict[str, object] = {
	"sin": sp.sin, "cos": sp.cos, "tan": sp.tan, "tanh": sp.tanh,
	"asin": sp.asin, "acos": sp.acos, "atan": sp.atan,
	"log": sp.log, "ln": sp.log, "exp": sp.exp, "sqrt": sp.sqrt,
}


class SympyBridge:
	"""Utility namespace for SymPy conversion and equality."""

	@staticmethod
	def _symbol(node: Identifier) -> sp.Symbol:
		if node.subscript is not None:
			sub = node.subscript
			if isinstance(sub, Identifier):
				return sp.Symbol(f"{node.name}_{sub.name}")
			if isinstance(sub, Number):
				return sp.Symbol(f"{node.name}_{sub.value}")
			raise ValueError(f"Unsupported subscript: {sub!r}")
		return sp.Symbol(node.name)

	@staticmethod
	def to_sympy(node: Node) -> sp.Basic:
		"""Translate a node to SymPy without evaluation; raise ValueError on unknown shapes."""
		if isinstance(node, Number):
			return sp.sympify(node.value)
		if isinstance(node, Identifier):
			return SympyBridge._symbol(node)
		if isinstance(node, Parentheses):
			return SympyBridge.to_sympy(node.body)
		if not isinstance(node, Apply):
			raise ValueError(f"Not a node: {node!r}")

		args = []
		for a in node.args:
			args.append(SympyBridge.to_sympy(a))
		op = node.op

		if isinstance(op, Identifier):
			fn = _FUNCTIONS.get(op.name)
			if fn is None:
				fn = sp.Function(op.name)
			return fn(*args, evaluate=False)

		if op == "add":
			return sp.Add(*args, evaluate=False)
		if op == "mul":
			return sp.Mul(*args, evaluate=False)
		if op == "div":
			num, den = args
			return sp.Mul(num, sp.Pow(den, -1, evaluate=False), evaluate=False)
		if op == "pow":
			base, exponent = args
			return sp.Pow(base, exponent, evaluate=False)
		if op == "neg":
			return sp.Mul(sp.Integer(-1), args[0], evaluate=False)
		if op == "pos":
			return args[0]
		if op == "abs":
			return sp.Abs(args[0], evaluate=False)
		if op == "fact":
			return sp.factorial(args[0], evaluate=False)
		if op == "nthRoot":
			if len(args) == 1:
				index = sp.Integer(2)
			else:
				index = args[1]
			return sp.Pow(args[0], sp.Pow(index, -1, evaluate=False), evaluate=False)
		if op in _RELATIONS:
			if len(args) != 2:
				raise ValueError(f"Chained relation {op} with {len(args)} operands is not supported")
			return _RELATIONS[op](args[0], args[1], evaluate=False)

		raise ValueError(f"Unsupported operator: {op}")

	@staticmethod
	def symbolic_equal(a: Node, b: Node) -> bool:
		"""
		Return True iff simplify(a - b) is exactly zero (symbolic certificate).
		"""
		d = sp.simplify((SympyBridge.to_sympy(a) - SympyBridge.to_sympy(b)).doit())
		if d == 0:
			return True
		else:
			return False


def to_sympy(node: Node) -> sp.Basic:
	"""Proxy to SympyBridge.to_sympy."""
	return SympyBridge.to_sympy(node)

def symbolic_equal(a: Node, b: Node) -> bool:
	"""Proxy to SympyBridge.symbolic_equal."""
	return SympyBridge.symbolic_equal(a, b)
