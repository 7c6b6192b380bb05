"""
The heart of the matter: a stack of tokens that reduces itself as it grows.

Every append leaves the stack with nothing left to collapse. Between appends,
then, the stack only ever holds operators and open-parentheses waiting on
operands, plus (possibly) one number on top. Operators get applied the moment
their operands exist, in order of arrival. Parentheses are the only way to
make something wait, and that is the whole of the language's grammar.
"""
from decimal import Decimal
from boozetools.support.foundation import Visitor

from .ontology import Token, Separator, UnaryPrefixOp, UnaryPostfixOp, BinaryOp, spell, spell_all
from .primitive import render
from .operations import apply_prefix, apply_postfix, apply_binary
from .diagnostics import PeachError, GrammarError

class Reducer(Visitor):
	stack : list[Token]

	def __init__(self):
		self.stack = []

	def append(self, token:Token):
		"""
		Add one token and collapse whatever that makes collapsible.
		If that fails, the stack goes back to how it was and the error propagates.
		"""
		snapshot = list(self.stack)
		try: self.visit(token)
		except PeachError:
			self.stack[:] = snapshot
			raise

	def residue(self) -> str:
		return spell_all(self.stack)

	def _top(self):
		return self.stack[-1] if self.stack else None

	def visit_object(self, token):
		raise AssertionError("Peach internal error: %r is not a kind of token" % (token,))

	def visit_Decimal(self, number:Decimal):
		stack = self.stack
		while stack:
			prior = stack[-1]
			if prior is Separator.OPEN:
				break
			elif isinstance(prior, UnaryPrefixOp):
				stack.pop()
				number = apply_prefix(prior, number)
			elif isinstance(prior, BinaryOp):
				stack.pop()
				left = stack.pop() if stack else None
				assert isinstance(left, Decimal), "Peach internal error: binary operator without a left operand"
				number = apply_binary(prior, left, number)
			else:
				raise GrammarError('number %s appended after token "%s"' % (render(number), spell(prior)))
		stack.append(number)

	def visit_UnaryPrefixOp(self, op:UnaryPrefixOp):
		self._await_operand(op)

	def visit_UnaryPostfixOp(self, op:UnaryPostfixOp):
		prior = self._top()
		if prior is None:
			raise GrammarError('Unary postfix operator "%s" was first token' % spell(op))
		if not isinstance(prior, Decimal):
			raise GrammarError('Unary postfix operator "%s" appended after non-numeric token "%s"' % (spell(op), spell(prior)))
		self.stack.pop()
		self.visit_Decimal(apply_postfix(op, prior))

	def visit_BinaryOp(self, op:BinaryOp):
		prior = self._top()
		if prior is None:
			raise GrammarError('Binary operator "%s" was first token' % spell(op))
		if not isinstance(prior, Decimal):
			raise GrammarError('Binary operator "%s" appended after non-numeric token "%s"' % (spell(op), spell(prior)))
		self.stack.append(op)

	def visit_Separator(self, sep:Separator):
		if sep is Separator.OPEN: self._await_operand(sep)
		else: self._close()

	def _await_operand(self, token):
		""" Prefix operators and open-parentheses go where an operand could start. """
		prior = self._top()
		if prior is None or prior is Separator.OPEN or isinstance(prior, (UnaryPrefixOp, BinaryOp)):
			self.stack.append(token)
		else:
			raise GrammarError('"%s" appended after "%s"' % (spell(token), spell(prior)))

	def _close(self):
		stack = self.stack
		close = spell(Separator.CLOSE)
		if not stack:
			raise GrammarError('"%s" was first token' % close)
		number = stack[-1]
		if not isinstance(number, Decimal):
			raise GrammarError('"%s" appended after non-numeric token "%s"' % (close, spell(number)))
		if len(stack) == 1:
			raise GrammarError('"%s" has no matching "%s" before number %s' % (close, spell(Separator.OPEN), render(number)))
		if stack[-2] is not Separator.OPEN:
			raise GrammarError('"%s" appended after non-"%s" token "%s" and number %s' % (close, spell(Separator.OPEN), spell(stack[-2]), render(number)))
		del stack[-2:]
		self.visit_Decimal(number)
