"""
Canonical sign flip for numbers, sums, fractions, and polynomial terms.

  3      -> -3
  -3x    -> 3x
  x + 3  -> -(x + 3)
  2/3    -> -2 / 3

negate is partial: shapes that are none of the above yield None.
"""

from __future__ import annotations
from typing import Optional
import logging

from mathast.build import NodeBuilder as B
from mathast.nodes import Node
from mathast.query.predicates import NodeQuery as Q
from mathast.query.polynomial import PolynomialGrammar as G
from mathast.query.terms import TermDecomposer as T

logger = logging.getLogger(__name__)


class SignNormalizer:
	"""Stateless sign canonicalizer."""

	@staticmethod
	def negate(node: Node) -> Optional[Node]:
		"""Return the canonical negation of node, collapsing double negation."""
		if Q.is_neg(node):
			return node.args[0]
		elif Q.is_add(node):
			return B.neg(node)
		elif Q.is_fraction(node):
			numerator = SignNormalizer.negate(Q.get_numerator(node))
			if numerator is None:
				logger.debug("negate: numerator of %r has no canonical negation", node)
				return None
			return B.div(numerator, Q.get_denominator(node))
		elif G.is_polynomial_term(node):
			coefficient = T.get_coefficient(node)
			if Q.is_neg(coefficient):
				rest = [arg for arg in node.args if arg is not coefficient]
				return B.apply(
					"mul",
					[SignNormalizer.negate(coefficient), *rest],
					implicit=node.implicit,
				)
			return B.neg(node)
		logger.debug("negate: no canonical negation for %r", node)
		return None


negate = SignNormalizer.negate
