"""
Everything to do with things going wrong, and with telling the user about it.
"""
import sys
from typing import Optional
from boozetools.support.failureprone import illustration

class PeachError(Exception):
	"""
	Base of every user-facing failure.
	The "problem" is plain text fit for the console;
	the "offset" is where in the input line the problem began, if anywhere in particular.
	"""
	def __init__(self, problem:str, offset:Optional[int]=None):
		super().__init__(problem, offset)
		self.problem, self.offset = problem, offset

	def __str__(self): return self.problem

	def situate(self, residue:str, offset:int) -> "PeachError":
		""" Restate the problem in light of how far the expression got before it. """
		restated = 'Expression reduced to "%s..." %s.' % (residue, self.problem)
		return type(self)(restated, offset if self.offset is None else self.offset)

class ScanError(PeachError):
	""" Unparseable number or unrecognized symbol """

class VariableError(PeachError):
	""" Bad variable name, or reading a variable nobody wrote """

class GrammarError(PeachError):
	""" A token turned up somewhere it cannot legally follow its predecessor """

class StructuralError(PeachError):
	""" The whole line did not come down to exactly one number """

class DomainError(PeachError):
	""" An operator got operands outside its range """

class Report:
	"""
	The verbose channel, plus the means to complain politely.
	Both go to standard-error, so results on standard-output stay clean.
	"""
	def __init__(self, *, verbose:int=0, stream=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._stream = stream

	def _out(self):
		return sys.stderr if self._stream is None else self._stream

	def info(self, *args):
		if self._verbose:
			print(*args, file=self._out())

	def complain(self, text:str, problem:str, offset:Optional[int], *, prefix:str=""):
		""" Show the problem, with a picture of where in the text it began when that's known. """
		stream = self._out()
		if offset is not None:
			print(illustrate(text, offset, prefix=prefix), file=stream)
		print(problem, file=stream)
		stream.flush()

def illustrate(text:str, offset:int, *, prefix:str="") -> str:
	return illustration(text, offset, 1, prefix=prefix, caption="")
