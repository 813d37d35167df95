import math
import itertools
import unittest

from loxia import runtime
from loxia.runtime import LoxTypeError

SAMPLES = [0.0, 1.0, -2.5, "", "1", "abc", True, False, None]

class ValueModelTests(unittest.TestCase):

	def test_cross_kind_equality_is_always_false(self):
		for a, b in itertools.product(SAMPLES, SAMPLES):
			if runtime.kind_of(a) is not runtime.kind_of(b):
				with self.subTest(a=a, b=b):
					self.assertFalse(runtime.values_equal(a, b))

	def test_python_conflations_are_not_equal(self):
		self.assertFalse(runtime.values_equal(True, 1.0))
		self.assertFalse(runtime.values_equal(False, 0.0))
		self.assertFalse(runtime.values_equal(None, False))

	def test_same_kind_equality(self):
		self.assertTrue(runtime.values_equal(1.0, 1.0))
		self.assertTrue(runtime.values_equal("a", "a"))
		self.assertTrue(runtime.values_equal(None, None))
		self.assertTrue(runtime.values_equal(False, False))
		self.assertFalse(runtime.values_equal("a", "b"))
		self.assertFalse(runtime.values_equal(math.nan, math.nan))

	def test_add(self):
		self.assertEqual(3.0, runtime.add(1.0, 2.0, None))
		self.assertEqual("ab", runtime.add("a", "b", None))
		for a, b in [(1.0, "b"), ("a", 1.0), (True, True), (None, None), (1.0, True)]:
			with self.subTest(a=a, b=b):
				with self.assertRaises(LoxTypeError):
					runtime.add(a, b, None)

	def test_arithmetic_needs_numbers(self):
		self.assertEqual(-1.0, runtime.arithmetic("-", 1.0, 2.0, None))
		self.assertEqual(6.0, runtime.arithmetic("*", 2.0, 3.0, None))
		self.assertEqual(0.5, runtime.arithmetic("/", 1.0, 2.0, None))
		for op in "-*/":
			with self.subTest(op):
				with self.assertRaises(LoxTypeError):
					runtime.arithmetic(op, "a", "b", None)

	def test_division_by_zero_follows_floating_point(self):
		self.assertEqual(math.inf, runtime.arithmetic("/", 1.0, 0.0, None))
		self.assertEqual(-math.inf, runtime.arithmetic("/", -1.0, 0.0, None))
		self.assertEqual(-math.inf, runtime.arithmetic("/", 1.0, -0.0, None))
		assert math.isnan(runtime.arithmetic("/", 0.0, 0.0, None))

	def test_unary(self):
		self.assertEqual(-3.0, runtime.negate(3.0, None))
		self.assertTrue(runtime.logical_not(False, None))
		with self.assertRaises(LoxTypeError):
			runtime.negate("3", None)
		with self.assertRaises(LoxTypeError):
			runtime.logical_not(3.0, None)
		with self.assertRaises(LoxTypeError):
			runtime.logical_not(None, None)

	def test_ordering(self):
		self.assertTrue(runtime.compare("<", 1.0, 2.0, None))
		self.assertTrue(runtime.compare(">=", 2.0, 2.0, None))
		self.assertTrue(runtime.compare("<", "abc", "abd", None))
		self.assertTrue(runtime.compare(">", True, False, None))
		self.assertTrue(runtime.compare("<=", None, None, None))
		self.assertFalse(runtime.compare("<", None, None, None))

	def test_ordering_needs_same_kind(self):
		for a, b in [(1.0, "1"), ("a", True), (None, 0.0), (True, 1.0)]:
			with self.subTest(a=a, b=b):
				with self.assertRaises(LoxTypeError):
					runtime.compare("<", a, b, None)

	def test_truthiness_is_for_booleans_only(self):
		self.assertTrue(runtime.is_truthy(True, None))
		self.assertFalse(runtime.is_truthy(False, None))
		for v in [0.0, 1.0, "", "x", None]:
			with self.subTest(v):
				with self.assertRaises(LoxTypeError):
					runtime.is_truthy(v, None)

	def test_display(self):
		self.assertEqual("65", runtime.display(65.0))
		self.assertEqual("-3", runtime.display(-3.0))
		self.assertEqual("1.5", runtime.display(1.5))
		self.assertEqual("0.30000000000000004", runtime.display(0.1 + 0.2))
		self.assertEqual("0.00001", runtime.display(0.00001))
		self.assertEqual("100000000000000000000000", runtime.display(1e23))
		self.assertEqual("1000000000000000000000", runtime.display(1e21))
		self.assertEqual("-0", runtime.display(-0.0))
		self.assertEqual("inf", runtime.display(math.inf))
		self.assertEqual("-inf", runtime.display(-math.inf))
		self.assertEqual("NaN", runtime.display(math.nan))
		self.assertEqual("hello", runtime.display("hello"))
		self.assertEqual("true", runtime.display(True))
		self.assertEqual("false", runtime.display(False))
		self.assertEqual("", runtime.display(None))

	def test_type_names(self):
		self.assertEqual(["number", "string", "boolean", "nil"], [runtime.type_name(v) for v in (1.0, "", True, None)])

	def test_error_without_site(self):
		self.assertEqual("Undefined variable 'q'.", str(runtime.UndefinedVariable(None, "q")))

if __name__ == '__main__':
	unittest.main()
