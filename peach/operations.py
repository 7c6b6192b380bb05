"""
What each operator actually does to its operand(s).

Each operator maps to a plain function of Decimal arguments.
A function that finds its operands out of range raises DomainError;
otherwise it returns the answer. Arithmetic happens in whatever decimal
context is current, which the interpreter arranges.
"""
from decimal import Decimal, DecimalException
from .primitive import ONE, HUNDRED, truth, render
from .ontology import UnaryPrefixOp, UnaryPostfixOp, BinaryOp, spell
from .diagnostics import DomainError

def _negate(x:Decimal) -> Decimal:
	if x > ONE:
		raise DomainError("%s%s resulted in a negative number" % (spell(UnaryPrefixOp.NEGATE), render(x)))
	return ONE - x

def _divide(x:Decimal, y:Decimal) -> Decimal:
	if y <= 0:
		raise DomainError("Attempted to divide by non-positive number %s" % render(y))
	return x / y

def _raise(x:Decimal, y:Decimal) -> Decimal:
	if x <= 0 and y <= 0:
		raise DomainError("Attempted to raise %s to the %sth power" % (render(x), render(y)))
	return x ** y

def _disjunct(x:Decimal, y:Decimal) -> Decimal:
	result = x + y - x * y
	if result < 0:
		raise DomainError("%s %s %s produces negative number %s" % (render(x), spell(BinaryOp.DISJUNCT), render(y), render(result)))
	return result

PREFIX = {
	UnaryPrefixOp.NEGATE: _negate,
	UnaryPrefixOp.IS_POSSIBLE: lambda x: truth(x > 0),
	UnaryPrefixOp.IS_CERTAIN: lambda x: truth(x >= ONE),
}

POSTFIX = {
	UnaryPostfixOp.GET_ONE_PERCENT: lambda x: x / HUNDRED,
}

BINARY = {
	BinaryOp.IS_EQUAL: lambda x, y: truth(x == y),
	BinaryOp.IS_LESS: lambda x, y: truth(x < y),
	BinaryOp.IS_MORE: lambda x, y: truth(x > y),
	BinaryOp.IS_NOT_EQUAL: lambda x, y: truth(x != y),
	BinaryOp.IS_LESS_OR_EQUAL: lambda x, y: truth(x <= y),
	BinaryOp.IS_MORE_OR_EQUAL: lambda x, y: truth(x >= y),
	BinaryOp.ADD: lambda x, y: x + y,
	BinaryOp.ABS_DIFF: lambda x, y: abs(x - y),
	BinaryOp.MULTIPLY: lambda x, y: x * y,
	BinaryOp.DIVIDE: _divide,
	BinaryOp.RAISE: _raise,
	BinaryOp.MIN: lambda x, y: x if x <= y else y,
	BinaryOp.AVG: lambda x, y: (x + y) / 2,
	BinaryOp.MAX: lambda x, y: x if x >= y else y,
	BinaryOp.DISJUNCT: _disjunct,
}

assert PREFIX.keys() == set(UnaryPrefixOp)
assert POSTFIX.keys() == set(UnaryPostfixOp)
assert BINARY.keys() == set(BinaryOp)

def _guarded(fn, picture:str, *args) -> Decimal:
	try: return fn(*args)
	except DecimalException as ex:
		# Overflow, or a power the decimal module cannot make sense of.
		raise DomainError("%s is out of range (%s)" % (picture, type(ex).__name__)) from None

def apply_prefix(op:UnaryPrefixOp, x:Decimal) -> Decimal:
	return _guarded(PREFIX[op], spell(op) + render(x), x)

def apply_postfix(op:UnaryPostfixOp, x:Decimal) -> Decimal:
	return _guarded(POSTFIX[op], render(x) + spell(op), x)

def apply_binary(op:BinaryOp, x:Decimal, y:Decimal) -> Decimal:
	return _guarded(BINARY[op], render(x) + spell(op) + render(y), x, y)
