"""Tests for the default text printer."""

import pytest

from mathast import build as b
from mathast.nodes import Apply, Identifier
from mathast.printer import PrintConfig, TextPrinter, print_node


class TestTextPrinter:
	def setup_method(self):
		self.x = b.identifier("x")
		self.y = b.identifier("y")
		self.one = b.number(1)
		self.two = b.number(2)

	def test_leaves(self):
		assert print_node(b.number("2.50")) == "2.50"
		assert print_node(self.x) == "x"
		assert print_node(b.identifier("x", subscript=self.one)) == "x_1"
		assert print_node(b.parens(self.x)) == "(x)"

	def test_sums(self):
		assert print_node(b.add(self.x, self.one)) == "x + 1"
		assert print_node(b.sub(self.x, self.one)) == "x - 1"
		assert print_node(b.add(self.x, b.neg(self.one))) == "x + -1"
		assert print_node(b.sub(self.x, b.add(self.y, self.one))) == "x - (y + 1)"

	def test_products(self):
		assert print_node(b.mul(self.two, self.x)) == "2 * x"
		assert print_node(b.implicit_mul(self.two, self.x)) == "2 x"
		assert print_node(b.implicit_mul(self.two, b.add(self.x, self.one))) == "2 (x + 1)"

	def test_division(self):
		assert print_node(b.div(self.x, self.y)) == "x / y"
		assert print_node(b.div(b.neg(self.two), b.number(3))) == "-2 / 3"
		assert print_node(b.div(self.x, b.mul(self.two, self.y))) == "x / (2 * y)"

	def test_powers(self):
		assert print_node(b.pow(self.x, self.two)) == "x^2"
		assert print_node(b.pow(b.add(self.x, self.one), self.two)) == "(x + 1)^2"
		assert print_node(b.pow(self.x, b.neg(self.one))) == "x^(-1)"
		assert print_node(b.pow(b.pow(self.x, self.two), self.two)) == "(x^2)^2"

	def test_unary(self):
		assert print_node(b.neg(self.x)) == "-x"
		assert print_node(b.neg(b.neg(self.x))) == "--x"
		assert print_node(b.neg(b.div(self.two, b.number(3)))) == "-(2 / 3)"
		assert print_node(b.pos(self.x)) == "+x"
		assert print_node(b.abs(b.add(self.x, self.y))) == "|x + y|"
		assert print_node(b.fact(self.x)) == "x!"
		assert print_node(b.fact(b.add(self.x, self.one))) == "(x + 1)!"

	def test_roots_relations_functions(self):
		assert print_node(b.nth_root(self.x)) == "nthRoot(x, 2)"
		assert print_node(b.eq(self.x, self.two)) == "x = 2"
		assert print_node(b.le(self.x, self.y)) == "x <= y"
		assert print_node(b.ne(self.x, self.y)) == "x != y"
		assert print_node(Apply(Identifier("sin"), (self.x,))) == "sin(x)"

	def test_config(self):
		printer = TextPrinter(PrintConfig(mul_symbol="·", implicit_separator="", spaced=False))
		assert printer(b.mul(self.two, self.x)) == "2·x"
		assert printer(b.implicit_mul(self.two, self.x)) == "2x"
		assert printer(b.add(self.x, self.one)) == "x+1"

	def test_rejects_non_nodes(self):
		with pytest.raises(TypeError):
			print_node("x")
