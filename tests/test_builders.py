"""Tests for node factories."""

from mathast import build
from mathast.nodes import Apply, Identifier, Number, Parentheses
from mathast.query import is_add, is_neg


class TestLeaves:
	def test_number_stores_text(self):
		assert build.number(2) == Number("2")
		assert build.number(2.5).value == "2.5"
		assert build.number("007").value == "007"

	def test_identifier(self):
		assert build.identifier("x") == Identifier("x")
		sub = build.identifier("x", subscript=build.number(1))
		assert sub.subscript == Number("1")

	def test_parens(self):
		assert build.parens(build.identifier("x")) == Parentheses(Identifier("x"))


class TestOperations:
	def setup_method(self):
		self.x = build.identifier("x")
		self.y = build.identifier("y")

	def test_apply_merges_flags(self):
		node = build.apply("neg", [self.x], was_minus=True)
		assert node == Apply("neg", (self.x,), was_minus=True)

	def test_unary(self):
		assert build.neg(self.x).op == "neg"
		assert build.pos(self.x).op == "pos"
		assert build.abs(self.x).op == "abs"
		assert build.fact(self.x).op == "fact"

	def test_add_keeps_order(self):
		node = build.add(self.y, self.x, build.number(1))
		assert node.args == (self.y, self.x, Number("1"))

	def test_sub_is_add_of_negation(self):
		node = build.sub(self.x, self.y)
		assert node == build.add(self.x, build.neg(self.y, was_minus=True))
		assert is_add(node)
		assert is_neg(node.args[1])
		assert node.args[1].was_minus

	def test_mul_and_implicit_mul(self):
		explicit = build.mul(build.number(2), self.x)
		implicit = build.implicit_mul(build.number(2), self.x)
		assert explicit.implicit is False
		assert implicit.implicit is True
		assert explicit.args == implicit.args

	def test_div_and_pow(self):
		assert build.div(self.x, self.y).args == (self.x, self.y)
		assert build.pow(self.x, build.number(2)).args == (self.x, Number("2"))

	def test_nth_root_default_index(self):
		assert build.nth_root(self.x).args == (self.x, Number("2"))
		assert build.nth_root(self.x, build.number(3)).args == (self.x, Number("3"))

	def test_relations(self):
		for name in ["eq", "ne", "lt", "le", "gt", "ge"]:
			node = getattr(build, name)(self.x, self.y)
			assert node == Apply(name, (self.x, self.y))

	def test_builder_class_matches_proxies(self):
		assert build.NodeBuilder.sub(self.x, self.y) == build.sub(self.x, self.y)
