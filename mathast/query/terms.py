"""
Term decomposition: coefficients, variable factors, and grouping of like terms.

Provides:
  • TermDecomposer.get_poly_degree(node)          — degree of a single-variable term
  • TermDecomposer.get_coefficient(node)          — numeric coefficient of a term
  • TermDecomposer.get_variable_factors(node)     — identifier / power-of-identifier factors
  • TermDecomposer.get_variable_factor_name(node) — name of a factor's identifier
  • TermDecomposer.sort_variables(variables)      — stable sort by factor name
  • TermDecomposer.get_coefficients_and_constants(node, ...) -> TermGroups
  • TermDecomposer.has_same_base(a, b)            — compare bases by printed text

The decomposition functions are partial: call them after a positive
is_polynomial_term / is_fraction check. Outside their domain they return None.

Printed text is the grouping key; the printer is injectable and defaults to the
package TextPrinter.

Module-level functions proxy to TermDecomposer methods for compatibility.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
import logging

from mathast.build import NodeBuilder as B
from mathast.nodes import Node
from mathast.printer import DEFAULT_PRINTER, PrinterFn
from .predicates import NodeQuery as Q
from .polynomial import PolynomialGrammar as G

logger = logging.getLogger(__name__)


@dataclass
class TermGroups:
	"""
	Accumulator for get_coefficients_and_constants.
	coefficient_map: printed variable part -> coefficients of every term with it.
	"""
	coefficient_map: Dict[str, List[Node]] = field(default_factory=dict)
	constants: List[Node] = field(default_factory=list)
	others: List[Node] = field(default_factory=list)


class TermDecomposer:
	"""Namespace of term-level extractors."""

	@staticmethod
	def get_poly_degree(node: Node) -> Optional[Node]:
		"""
		Degree of a polynomial term as a node, e.g. 6x^2 -> 2. Multivariable terms
		are not handled. A neg whose inner node is not an Apply raises AttributeError.
		"""
		if Q.is_number(node):
			return B.number(0)
		elif Q.is_identifier(node) or G.is_polynomial(node):
			return B.number(1)
		elif Q.is_pow(node):
			return node.args[1]
		elif Q.is_mul(node):
			return TermDecomposer.get_poly_degree(node.args[1])
		elif Q.is_neg(node):
			variable = node.args[0]
			return TermDecomposer.get_poly_degree(variable.args[1])
		logger.debug("get_poly_degree: no degree for %r", node)
		return None

	@staticmethod
	def get_coefficient(node: Node) -> Optional[Node]:
		"""
		Coefficient of a polynomial term: the number itself, 1 for x or x^n, the
		negated inner coefficient for neg, and the numeric factor(s) of a mul.
		"""
		if Q.is_number(node):
			return node
		elif Q.is_identifier(node) or Q.is_pow(node):
			return B.number("1")
		elif Q.is_neg(node):
			inner = TermDecomposer.get_coefficient(node.args[0])
			if inner is None:
				return None
			return B.neg(inner, was_minus=node.was_minus)
		elif Q.is_mul(node):
			numbers = []
			for arg in node.args:
				if Q.is_number(arg) or Q.is_constant_fraction(arg):
					numbers.append(arg)
			if len(numbers) > 1:
				return B.mul(*numbers)
			elif len(numbers) > 0:
				return numbers[0]
			else:
				return B.number("1")
		logger.debug("get_coefficient: unsupported shape %r", node)
		return None

	@staticmethod
	def get_variable_factors(node: Node) -> List[Node]:
		"""Variable factors of a term; numeric factors of a mul are dropped."""
		if G.is_variable_factor(node):
			return [node]
		elif Q.is_mul(node):
			out = []
			for arg in node.args:
				if G.is_variable_factor(arg):
					out.append(arg)
			return out
		elif Q.is_neg(node):
			# TODO: combine factors across sibling negations, e.g. (x)(-y)(z)
			return TermDecomposer.get_variable_factors(node.args[0])
		else:
			return []

	@staticmethod
	def get_variable_factor_name(node: Node) -> Optional[str]:
		if Q.is_identifier(node):
			return node.name
		elif Q.is_pow(node):
			return TermDecomposer.get_variable_factor_name(node.args[0])
		else:
			return None

	@staticmethod
	def sort_variables(variables: Iterable[Node]) -> List[Node]:
		"""Stable ascending sort by factor name; returns a new list."""
		return sorted(variables, key=lambda v: TermDecomposer.get_variable_factor_name(v) or "")

	@staticmethod
	def _variable_key(node: Node, printer: PrinterFn) -> str:
		"""Printed variable part of a term, independent of factor order."""
		sorted_variables = TermDecomposer.sort_variables(TermDecomposer.get_variable_factors(node))
		if len(sorted_variables) > 1:
			implicit = Q.is_implicit(node)
			return printer(B.apply("mul", sorted_variables, implicit=implicit))
		return printer(sorted_variables[0])

	@staticmethod
	def _is_keyed_term(node: Node) -> bool:
		"""
		A polynomial term whose variable factors fully describe its variable part.
		Products qualify only when every factor is numeric or a variable factor, so
		2x(x + 1)^2 and x(-y) are not keyed as like terms of x.
		"""
		if not G.is_polynomial_term(node) or G.has_constant_base(node):
			return False
		if not TermDecomposer.get_variable_factors(node):
			return False
		inner = node
		while Q.is_neg(inner):
			inner = inner.args[0]
		if Q.is_mul(inner):
			for arg in inner.args:
				if not (Q.is_number(arg) or Q.is_constant_fraction(arg) or G.is_variable_factor(arg)):
					return False
		return True

	@staticmethod
	def _collect(node: Node, groups: TermGroups, printer: PrinterFn) -> None:
		if Q.is_number(node) or Q.is_constant_fraction(node):
			groups.constants.append(node)
		elif G.is_polynomial(node):
			for arg in node.args:
				TermDecomposer._collect(arg, groups, printer)
		elif TermDecomposer._is_keyed_term(node):
			key = TermDecomposer._variable_key(node, printer)
			coefficient = TermDecomposer.get_coefficient(node)
			if key not in groups.coefficient_map:
				groups.coefficient_map[key] = [coefficient]
			else:
				groups.coefficient_map[key].append(coefficient)
		elif Q.is_apply(node):
			for arg in node.args:
				TermDecomposer._collect(arg, groups, printer)
		else:
			logger.debug("get_coefficients_and_constants: %r goes to others", node)
			groups.others.append(node)

	@staticmethod
	def get_coefficients_and_constants(
		node: Node,
		coefficient_map: Optional[Dict[str, List[Node]]] = None,
		constants: Optional[List[Node]] = None,
		others: Optional[List[Node]] = None,
		printer: Optional[PrinterFn] = None,
	) -> TermGroups:
		"""
		Partition a polynomial into like-term coefficients, constants, and the rest.

		Collections passed in are appended to in place; any omitted one is created
		fresh for this call.
		"""
		groups = TermGroups(
			coefficient_map if coefficient_map is not None else {},
			constants if constants is not None else [],
			others if others is not None else [],
		)
		TermDecomposer._collect(node, groups, printer or DEFAULT_PRINTER)
		return groups

	@staticmethod
	def has_same_base(node1: Node, node2: Node, printer: Optional[PrinterFn] = None) -> bool:
		"""
		True if the nodes share a base: (x + 1)^1 and (x + 1)^3 do, x^2 and
		(x + 1)^2 do not.
		"""
		p = printer or DEFAULT_PRINTER
		if p(node1) == p(node2):
			return True
		if Q.is_pow(node1) and p(node1.args[0]) == p(node2):
			return True
		if Q.is_pow(node2) and p(node1) == p(node2.args[0]):
			return True
		if Q.is_pow(node1) and Q.is_pow(node2) and p(node1.args[0]) == p(node2.args[0]):
			return True
		return False


get_poly_degree = TermDecomposer.get_poly_degree
get_coefficient = TermDecomposer.get_coefficient
get_variable_factors = TermDecomposer.get_variable_factors
get_variable_factor_name = TermDecomposer.get_variable_factor_name
sort_variables = TermDecomposer.sort_variables
get_coefficients_and_constants = TermDecomposer.get_coefficients_and_constants
has_same_base = TermDecomposer.has_same_base
