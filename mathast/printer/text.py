"""
Deterministic text printer for math-expression nodes.

The query layer only needs a Callable[[Node], str] that prints structurally equal
nodes identically; TextPrinter is the default one. Operands whose precedence is
lower than their parent's are wrapped in parentheses.

Precedence (low → high): relations, add, mul/div, neg/pos, pow, fact, atoms.
"""

from __future__ import annotations
from typing import Callable, Optional

from mathast.nodes import Apply, Identifier, Node, Number, Parentheses, RELATION_SYMBOLS
from .config import PrintConfig


PrinterFn = Callable[[Node], str]

_PREC_REL = 0
_PREC_ADD = 1
_PREC_MUL = 2
_PREC_UNARY = 3
_PREC_POW = 4
_PREC_FACT = 5
_PREC_ATOM = 6


class TextPrinter:
	"""Render nodes as canonical infix text."""

	def __init__(self, config: Optional[PrintConfig] = None) -> None:
		self.config = config or PrintConfig()

	def __call__(self, node: Node) -> str:
		return self.print(node)

	def _binary(self, symbol: str) -> str:
		if self.config.spaced:
			return f" {symbol} "
		return symbol

	def precedence(self, node: Node) -> int:
		"""Binding strength of the node's outermost operator."""
		if not isinstance(node, Apply) or isinstance(node.op, Identifier):
			return _PREC_ATOM
		op = node.op
		if op in RELATION_SYMBOLS:
			return _PREC_REL
		if op == "add":
			return _PREC_ADD
		if op in ("mul", "div"):
			return _PREC_MUL
		if op in ("neg", "pos"):
			return _PREC_UNARY
		if op == "pow":
			return _PREC_POW
		if op == "fact":
			return _PREC_FACT
		return _PREC_ATOM

	def _wrap(self, node: Node, min_prec: int) -> str:
		"""Print node, parenthesised when it binds looser than min_prec."""
		text = self.print(node)
		if self.precedence(node) < min_prec:
			return f"({text})"
		return text

	def print(self, node: Node) -> str:
		"""Return the canonical text of a node."""
		if isinstance(node, Number):
			return node.value
		if isinstance(node, Identifier):
			if node.subscript is not None:
				return f"{node.name}_{self._wrap(node.subscript, _PREC_ATOM)}"
			return node.name
		if isinstance(node, Parentheses):
			return f"({self.print(node.body)})"
		if isinstance(node, Apply):
			return self._print_apply(node)
		raise TypeError(f"Cannot print object of type {type(node).__name__}")

	def _print_apply(self, node: Apply) -> str:
		op = node.op
		args = node.args

		if isinstance(op, Identifier):
			inner = ", ".join(self.print(a) for a in args)
			return f"{self.print(op)}({inner})"

		if op in RELATION_SYMBOLS:
			sep = self._binary(RELATION_SYMBOLS[op])
			return sep.join(self._wrap(a, _PREC_REL + 1) for a in args)

		if op == "add":
			parts = [self._wrap(args[0], _PREC_ADD)]
			for term in args[1:]:
				if isinstance(term, Apply) and term.op == "neg" and term.was_minus:
					parts.append(self._binary("-"))
					parts.append(self._wrap(term.args[0], _PREC_ADD + 1))
				else:
					parts.append(self._binary("+"))
					parts.append(self._wrap(term, _PREC_ADD))
			return "".join(parts)

		if op == "mul":
			if node.implicit:
				sep = self.config.implicit_separator
			else:
				sep = self._binary(self.config.mul_symbol)
			return sep.join(self._wrap(a, _PREC_MUL) for a in args)

		if op == "div":
			numerator, denominator = args
			return (
				self._wrap(numerator, _PREC_MUL)
				+ self._binary("/")
				+ self._wrap(denominator, _PREC_MUL + 1)
			)

		if op == "pow":
			base, exponent = args
			return f"{self._wrap(base, _PREC_POW + 1)}^{self._wrap(exponent, _PREC_POW)}"

		if op == "neg":
			return f"-{self._wrap(args[0], _PREC_UNARY)}"

		if op == "pos":
			return f"+{self._wrap(args[0], _PREC_UNARY)}"

		if op == "abs":
			return f"|{self.print(args[0])}|"

		if op == "fact":
			return f"{self._wrap(args[0], _PREC_ATOM)}!"

		inner = ", ".join(self.print(a) for a in args)
		return f"{op}({inner})"


DEFAULT_PRINTER = TextPrinter()


def print_node(node: Node) -> str:
	"""Proxy to the default TextPrinter."""
	return DEFAULT_PRINTER.print(node)
