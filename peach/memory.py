"""
The 52 variables: one per letter, case-sensitive.

An interpreter owns (or is handed) one of these, so tests and embedders can
have as many independent sets of variables as they like.
"""
from decimal import Decimal
from .primitive import UNASSIGNED
from .diagnostics import VariableError

SIZE = 52

class Memory:
	_slots : list[Decimal]

	def __init__(self):
		self._slots = [UNASSIGNED] * SIZE

	@staticmethod
	def index(letter:str) -> int:
		""" A-Z map to 0-25, a-z to 26-51, and anything else to -1. """
		if len(letter) != 1: return -1
		if 'A' <= letter <= 'Z': return ord(letter) - ord('A')
		if 'a' <= letter <= 'z': return ord(letter) - ord('a') + 26
		return -1

	@staticmethod
	def letter(index:int) -> str:
		return chr(ord('A') + index) if index < 26 else chr(ord('a') + index - 26)

	def get(self, letter:str) -> Decimal:
		index = self.index(letter)
		if index < 0:
			raise VariableError('"%s" is not a valid variable name' % letter)
		value = self._slots[index]
		if value < 0:
			raise VariableError("Variable %s not assigned" % letter)
		return value

	def set(self, letter:str, value:Decimal):
		index = self.index(letter)
		assert index >= 0, letter
		self._slots[index] = value

	def reset(self):
		self._slots[:] = [UNASSIGNED] * SIZE

	def assigned(self) -> dict[str, Decimal]:
		return {self.letter(i): v for i, v in enumerate(self._slots) if v >= 0}
