"""Tests for the polynomial-term grammar."""

from mathast import build as b
from mathast.query import (
	has_constant_base,
	is_polynomial,
	is_polynomial_term,
	is_variable_factor,
)


class TestVariableFactor:
	def setup_method(self):
		self.x = b.identifier("x")
		self.y = b.identifier("y")

	def test_identifier(self):
		assert is_variable_factor(self.x)

	def test_power_of_identifier(self):
		assert is_variable_factor(b.pow(self.x, b.number(2)))
		assert is_variable_factor(b.pow(self.x, b.neg(b.number(2))))

	def test_exponent_tower(self):
		assert is_variable_factor(b.pow(self.x, b.pow(self.x, b.number(2))))
		assert is_variable_factor(b.pow(self.x, self.y))

	def test_rejects_other_bases(self):
		assert not is_variable_factor(b.pow(b.number(2), self.x))
		assert not is_variable_factor(b.pow(b.add(self.x, b.number(1)), b.number(2)))
		assert not is_variable_factor(b.number(3))
		assert not is_variable_factor(b.implicit_mul(b.number(2), self.x))

	def test_rejects_non_numeric_non_variable_exponent(self):
		assert not is_variable_factor(b.pow(self.x, b.add(self.y, b.number(1))))


class TestPolynomialTerm:
	def setup_method(self):
		self.x = b.identifier("x")
		self.y = b.identifier("y")

	def test_numbers(self):
		assert is_polynomial_term(b.number(5))
		assert is_polynomial_term(b.number("2.5"))
		assert is_polynomial_term(b.neg(b.number(5)))
		assert is_polynomial_term(b.div(b.number(2), b.number(3)))

	def test_identifier(self):
		assert is_polynomial_term(self.x)

	def test_powers(self):
		assert is_polynomial_term(b.pow(self.x, b.number(2)))
		poly = b.add(self.x, b.number(1))
		assert is_polynomial_term(b.pow(poly, b.number(2)))
		assert not is_polynomial_term(b.pow(b.number(2), self.x))
		assert not is_polynomial_term(b.pow(self.x, b.abs(self.y)))

	def test_negation(self):
		assert is_polynomial_term(b.neg(self.x))
		assert is_polynomial_term(b.neg(b.implicit_mul(b.number(3), self.x)))

	def test_products(self):
		assert is_polynomial_term(b.implicit_mul(b.number(2), self.x, self.y))
		assert is_polynomial_term(b.mul(b.number(2), b.pow(self.x, b.number(3))))
		assert not is_polynomial_term(b.mul(b.number(2), b.abs(self.x)))

	def test_outside_the_grammar_is_indeterminate(self):
		assert is_polynomial_term(b.abs(self.x)) is None
		assert is_polynomial_term(b.parens(self.x)) is None
		assert is_polynomial_term(b.add(self.x, self.y)) is None


class TestPolynomial:
	def setup_method(self):
		self.x = b.identifier("x")

	def test_sum_of_terms(self):
		node = b.add(b.implicit_mul(b.number(2), self.x), b.pow(self.x, b.number(2)), b.number(3))
		assert is_polynomial(node)

	def test_subtraction(self):
		assert is_polynomial(b.sub(b.implicit_mul(b.number(2), self.x), b.number(3)))

	def test_rejects_non_terms(self):
		assert not is_polynomial(b.add(self.x, b.abs(self.x)))

	def test_requires_a_sum(self):
		assert not is_polynomial(self.x)
		assert not is_polynomial(b.implicit_mul(b.number(2), self.x))


class TestConstantBase:
	def test_numeric_base(self):
		x = b.identifier("x")
		assert has_constant_base(b.pow(b.number(2), x))
		assert has_constant_base(b.pow(b.neg(b.number(2)), x))
		assert not has_constant_base(b.pow(x, b.number(2)))
		assert not has_constant_base(b.number(2))
