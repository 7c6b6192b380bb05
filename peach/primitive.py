"""
The one and only data type: a base-10 decimal number.

Peach does its arithmetic in the standard library's Decimal under a context
of its own, so that results come out the same no matter what some other
part of the host program has done to the thread's default context.
"""
from decimal import Decimal, Context, InvalidOperation, ROUND_HALF_EVEN, DivisionByZero, Overflow, Underflow

DEFAULT_PRECISION = 28

ZERO = Decimal(0)
ONE = Decimal(1)
HUNDRED = Decimal(100)

# Marks a variable slot that has never been written.
UNASSIGNED = Decimal(-1)

def make_context(precision:int=DEFAULT_PRECISION) -> Context:
	"""
	Overflow and the like raise, and so does underflow: a result too small
	to represent would otherwise come back as a zero with an exponent in
	the millions. The operator layer turns those into proper domain errors.
	"""
	if precision < 1:
		raise ValueError("Precision must be at least one digit, not %r" % precision)
	traps = [InvalidOperation, DivisionByZero, Overflow, Underflow]
	return Context(prec=precision, rounding=ROUND_HALF_EVEN, traps=traps)

def parse_number(text:str) -> Decimal:
	""" Raises ValueError on text that isn't a plain decimal numeral. """
	try: return Decimal(text)
	except InvalidOperation: raise ValueError(text) from None

def truth(flag:bool) -> Decimal:
	return ONE if flag else ZERO

def render(value:Decimal) -> str:
	""" Positional notation always: 1E+2 reads as 100. """
	return format(value, 'f')
