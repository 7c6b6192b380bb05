import unittest
from decimal import Decimal, Context, localcontext

from peach.ontology import UnaryPrefixOp, UnaryPostfixOp, BinaryOp
from peach.operations import apply_prefix, apply_postfix, apply_binary
from peach.primitive import make_context
from peach.diagnostics import DomainError

D = Decimal
SAMPLES = [D(0), D("0.1"), D("0.25"), D("0.5"), D(1), D("1.5"), D(3)]

class UnaryTests(unittest.TestCase):

	def test_negate(self):
		for text in ["0", "0.1", "0.5", "0.8", "1"]:
			with self.subTest(text):
				self.assertEqual(1 - D(text), apply_prefix(UnaryPrefixOp.NEGATE, D(text)))
		for text in ["1.2", "1.0001", "2"]:
			with self.subTest(text):
				with self.assertRaises(DomainError) as cm:
					apply_prefix(UnaryPrefixOp.NEGATE, D(text))
				self.assertIn("negative", cm.exception.problem)

	def test_certainty_and_possibility(self):
		for x in SAMPLES:
			with self.subTest(x=x):
				self.assertEqual(D(1) if x >= 1 else D(0), apply_prefix(UnaryPrefixOp.IS_CERTAIN, x))
				self.assertEqual(D(1) if x > 0 else D(0), apply_prefix(UnaryPrefixOp.IS_POSSIBLE, x))

	def test_one_percent(self):
		self.assertEqual(D("0.55"), apply_postfix(UnaryPostfixOp.GET_ONE_PERCENT, D(55)))
		for x in SAMPLES:
			with self.subTest(x=x):
				self.assertEqual(x / 100, apply_postfix(UnaryPostfixOp.GET_ONE_PERCENT, x))

class ComparisonTests(unittest.TestCase):

	def compare(self, op, x, y) -> bool:
		result = apply_binary(op, x, y)
		self.assertIn(result, (D(0), D(1)))
		return result == 1

	def test_trichotomy(self):
		for x in SAMPLES:
			for y in SAMPLES:
				with self.subTest(x=x, y=y):
					less = self.compare(BinaryOp.IS_LESS, x, y)
					same = self.compare(BinaryOp.IS_EQUAL, x, y)
					more = self.compare(BinaryOp.IS_MORE, x, y)
					self.assertEqual(1, [less, same, more].count(True))
					self.assertEqual(less or same, self.compare(BinaryOp.IS_LESS_OR_EQUAL, x, y))
					self.assertEqual(more or same, self.compare(BinaryOp.IS_MORE_OR_EQUAL, x, y))
					self.assertEqual(not same, self.compare(BinaryOp.IS_NOT_EQUAL, x, y))

	def test_trailing_zeros_do_not_matter(self):
		self.assertTrue(self.compare(BinaryOp.IS_EQUAL, D("0.60"), D("0.6")))

class ArithmeticTests(unittest.TestCase):

	def test_add_and_multiply(self):
		self.assertEqual(D("1.7"), apply_binary(BinaryOp.ADD, D("0.5"), D("1.2")))
		self.assertEqual(D("0.6"), apply_binary(BinaryOp.MULTIPLY, D("0.5"), D("1.2")))

	def test_difference_is_absolute(self):
		self.assertEqual(D("0.6"), apply_binary(BinaryOp.ABS_DIFF, D("0.8"), D("0.2")))
		self.assertEqual(D("0.2"), apply_binary(BinaryOp.ABS_DIFF, D("0.8"), D(1)))

	def test_divide(self):
		self.assertEqual(D("0.4"), apply_binary(BinaryOp.DIVIDE, D("0.8"), D(2)))
		for y in [D(0), D(-1), D("-0.5")]:
			with self.subTest(y=y):
				with self.assertRaises(DomainError):
					apply_binary(BinaryOp.DIVIDE, D(1), y)

	def test_raise(self):
		self.assertEqual(D("0.25"), apply_binary(BinaryOp.RAISE, D("0.5"), D(2)))
		self.assertEqual(D(0), apply_binary(BinaryOp.RAISE, D(0), D(2)))
		self.assertEqual(D(1), apply_binary(BinaryOp.RAISE, D(2), D(0)))
		self.assertEqual(D("0.5"), apply_binary(BinaryOp.RAISE, D(2), D(-1)))
		for x, y in [(D(0), D(0)), (D(-1), D(0)), (D(0), D(-2))]:
			with self.subTest(x=x, y=y):
				with self.assertRaises(DomainError):
					apply_binary(BinaryOp.RAISE, x, y)

	def test_overflow_is_a_domain_error(self):
		with localcontext(Context(prec=28, Emax=50)):
			with self.assertRaises(DomainError) as cm:
				apply_binary(BinaryOp.RAISE, D(10), D(100))
		self.assertIn("out of range", cm.exception.problem)

	def test_underflow_is_a_domain_error(self):
		with localcontext(make_context()):
			with self.assertRaises(DomainError) as cm:
				apply_binary(BinaryOp.RAISE, D("0.1"), D(999999999))
			self.assertEqual(D("0.0009765625"), apply_binary(BinaryOp.RAISE, D("0.5"), D(10)))
		self.assertIn("out of range", cm.exception.problem)

class FuzzyTests(unittest.TestCase):

	def test_min_avg_max(self):
		self.assertEqual(D("0.2"), apply_binary(BinaryOp.MIN, D("0.2"), D("0.8")))
		self.assertEqual(D("0.5"), apply_binary(BinaryOp.AVG, D("0.2"), D("0.8")))
		self.assertEqual(D("0.8"), apply_binary(BinaryOp.MAX, D("0.2"), D("0.8")))

	def test_disjunct(self):
		self.assertEqual(D("0.75"), apply_binary(BinaryOp.DISJUNCT, D("0.5"), D("0.5")))
		for x in SAMPLES:
			for y in SAMPLES:
				if x + y - x * y < 0: continue
				with self.subTest(x=x, y=y):
					self.assertEqual(apply_binary(BinaryOp.DISJUNCT, x, y), apply_binary(BinaryOp.DISJUNCT, y, x))

	def test_negative_disjunct(self):
		with self.assertRaises(DomainError):
			apply_binary(BinaryOp.DISJUNCT, D(2), D(3))

if __name__ == '__main__':
	unittest.main()
