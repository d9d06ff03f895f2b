"""
Polynomial grammar: recursive recognizers for polynomial terms.

Grammar (structural, single pass, no backtracking):
  variable factor := Identifier | pow(Identifier, Number | variable factor)
  term            := Number | constant fraction | decimal | Identifier
                   | pow(Identifier | polynomial, term) | neg(term) | mul(term, ...)
  polynomial      := add(term, ...)
"""

from __future__ import annotations
from typing import Optional

from mathast.nodes import Node
from .predicates import NodeQuery as Q


class PolynomialGrammar:
	"""Recognizers over the node model; no state."""

	@staticmethod
	def is_variable_factor(node: Optional[Node]) -> bool:
		"""x, x^2, and exponent towers such as x^(y^2)."""
		if Q.is_identifier(node):
			return True
		if Q.is_pow(node) and Q.is_identifier(node.args[0]):
			exponent = node.args[1]
			return Q.is_number(exponent) or PolynomialGrammar.is_variable_factor(exponent)
		return False

	@staticmethod
	def is_polynomial_term(node: Optional[Node]) -> Optional[bool]:
		"""
		True for monomial-like shapes. Shapes outside the grammar (other Apply ops,
		parentheses) give None, which callers treat as false.
		"""
		if Q.is_number(node) or Q.is_constant_fraction(node) or Q.is_decimal(node):
			return True
		elif Q.is_identifier(node):
			return True
		elif Q.is_pow(node):
			base, exponent = node.args
			return bool(
				(Q.is_identifier(base) or PolynomialGrammar.is_polynomial(base))
				and PolynomialGrammar.is_polynomial_term(exponent)
			)
		elif Q.is_neg(node):
			return PolynomialGrammar.is_polynomial_term(node.args[0])
		elif Q.is_mul(node):
			for arg in node.args:
				if not PolynomialGrammar.is_polynomial_term(arg):
					return False
			return True
		return None

	@staticmethod
	def is_polynomial(node: Optional[Node]) -> bool:
		"""A sum whose every operand is a polynomial term."""
		if not Q.is_add(node):
			return False
		for arg in node.args:
			if not PolynomialGrammar.is_polynomial_term(arg):
				return False
		return True

	@staticmethod
	def has_constant_base(node: Optional[Node]) -> bool:
		"""A power with a numeric base, like 2^x."""
		return Q.is_pow(node) and Q.is_number(node.args[0])


is_variable_factor = PolynomialGrammar.is_variable_factor
is_polynomial_term = PolynomialGrammar.is_polynomial_term
is_polynomial = PolynomialGrammar.is_polynomial
has_constant_base = PolynomialGrammar.has_constant_base
