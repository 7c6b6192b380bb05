"""
The driver: one line of input in, one Outcome out.

A line is either an expression, whose value is the result, or an assignment
"p:expression", which stores the value in variable p and has no result.
"""
from decimal import Decimal, localcontext
from threading import Lock
from typing import NamedTuple, Optional

from .primitive import DEFAULT_PRECISION, make_context
from .ontology import spell
from .memory import Memory
from .front_end import scan
from .reduction import Reducer
from .diagnostics import Report, PeachError, VariableError, StructuralError

class Outcome(NamedTuple):
	"""
	has_value and no error: display the value.
	Neither value nor error: an assignment went through.
	An error: the error_offset says where in the line it began, or is None if nowhere in particular.
	"""
	value: Optional[Decimal]
	has_value: bool
	error: Optional[str]
	error_offset: Optional[int]

ASSIGNED = Outcome(None, False, None, None)

def parse_expression(text:str, start:int, memory:Memory, report:Report) -> Decimal:
	""" Reduce text[start:] to a single number, or raise the reason why not. """
	reducer = Reducer()
	tokens = scan(text, start, memory)
	offset = start
	while True:
		try:
			offset, token = next(tokens)
		except StopIteration:
			break
		except PeachError as ex:
			raise ex.situate(reducer.residue(), offset)
		try: reducer.append(token)
		except PeachError as ex:
			raise ex.situate(reducer.residue(), offset)
		report.info("%4d  %-6s -> %s" % (offset, spell(token), reducer.residue()))
	stack = reducer.stack
	if len(stack) != 1:
		raise StructuralError('Expression reduced to "%s"' % reducer.residue())
	if not isinstance(stack[0], Decimal):
		raise StructuralError('Expression reduced to non-numeric token "%s"' % spell(stack[0]))
	return stack[0]

class Interpreter:
	"""
	Owns (or shares) a set of variables, and evaluates lines against them.
	Evaluation holds a lock, so concurrent callers take turns.
	"""
	def __init__(self, memory:Optional[Memory]=None, *, report:Optional[Report]=None, precision:int=DEFAULT_PRECISION):
		self.memory = Memory() if memory is None else memory
		self.report = Report() if report is None else report
		self._context = make_context(precision)
		self._mutex = Lock()

	def parse_input(self, text:str) -> Optional[Decimal]:
		"""
		The value of an expression, or None for an assignment.
		Raises a PeachError for anything amiss.
		"""
		with self._mutex, localcontext(self._context):
			if len(text) < 2 or text[1] != ':':
				return parse_expression(text, 0, self.memory, self.report)
			letter = text[0]
			if Memory.index(letter) < 0:
				raise VariableError('"%s" is not a valid variable name' % letter, 0)
			value = parse_expression(text, 2, self.memory, self.report)
			self.memory.set(letter, value)
			self.report.info("%s := %s" % (letter, spell(value)))
			return None

	def evaluate(self, text:str) -> Outcome:
		try: value = self.parse_input(text)
		except PeachError as ex:
			return Outcome(None, False, ex.problem, ex.offset)
		if value is None: return ASSIGNED
		else: return Outcome(value, True, None, None)
