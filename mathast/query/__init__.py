"""
Public API (function-shaped re-exports for tests and callers)
------------------------------------------------------------
is_identifier, is_apply, is_parens, is_function, is_operation -> bool
is_add, is_mul, is_div, is_pow, is_neg, is_pos, is_abs, is_fact, is_nth_root -> bool
is_number, is_integer, is_decimal, is_rel, is_implicit -> bool
is_fraction, is_constant_fraction, is_integer_fraction -> bool
get_value(node) -> float | None
get_numerator(node), get_denominator(node) -> Node | None

is_variable_factor, is_polynomial, has_constant_base -> bool
is_polynomial_term(node) -> bool | None

get_poly_degree(node), get_coefficient(node) -> Node | None
get_variable_factors(node) -> List[Node]
get_variable_factor_name(node) -> str | None
sort_variables(variables) -> List[Node]
get_coefficients_and_constants(node, ...) -> TermGroups
has_same_base(a, b, printer=None) -> bool
"""

from .predicates import NodeQuery, RELATION_SYMBOLS
from .polynomial import PolynomialGrammar
from .terms import TermDecomposer, TermGroups


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

is_variable_factor = PolynomialGrammar.is_variable_factor
is_polynomial_term = PolynomialGrammar.is_polynomial_term
is_polynomial = PolynomialGrammar.is_polynomial
has_constant_base = PolynomialGrammar.has_constant_base

get_poly_degree = TermDecomposer.get_poly_degree
get_coefficient = TermDecomposer.get_coefficient
get_variable_factors = TermDecomposer.get_variable_factors
get_variable_factor_name = TermDecomposer.get_variable_factor_name
sort_variables = TermDecomposer.sort_variables
get_coefficients_and_constants = TermDecomposer.get_coefficients_and_constants
has_same_base = TermDecomposer.has_same_base

__all__ = [
	"NodeQuery", "PolynomialGrammar", "TermDecomposer", "TermGroups", "RELATION_SYMBOLS",
	"is_identifier", "is_apply", "is_parens", "is_function", "is_operation",
	"is_add", "is_mul", "is_div", "is_pow", "is_neg", "is_pos", "is_abs", "is_fact", "is_nth_root",
	"is_rel", "is_number", "is_integer", "is_decimal",
	"is_fraction", "is_constant_fraction", "is_integer_fraction", "is_implicit",
	"get_value", "get_numerator", "get_denominator",
	"is_variable_factor", "is_polynomial_term", "is_polynomial", "has_constant_base",
	"get_poly_degree", "get_coefficient", "get_variable_factors", "get_variable_factor_name",
	"sort_variables", "get_coefficients_and_constants", "has_same_base",
]
