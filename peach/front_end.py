"""
The scanner: from a line of text to a lazy stream of tokens.

The lexicon is a booze-tools mini-scanner. Its maximal-munch rule is what
settles "<>" against "<", or "~=" against "~". The catch-all pattern at the
bottom loses every tie by virtue of being declared last, so it only ever
matches a character nothing else will take.
"""
from typing import Iterator
from boozetools.scanning.miniscan import Definition
from boozetools.scanning.engine import IterableScanner

from .primitive import parse_number
from .ontology import Token, TOKEN_FOR, token_for
from .memory import Memory
from .diagnostics import ScanError, VariableError

def _escaped(spelling:str) -> str:
	""" Every spelling is punctuation, and backslash makes punctuation literal. """
	return ''.join('\\' + c for c in spelling)

lexicon = Definition("Peach")

@lexicon.on(r"[0-9.]+")
def _number(yy:IterableScanner): yy.token("number", (yy.left, yy.match()))

@lexicon.on(r"{alpha}")
def _letter(yy:IterableScanner): yy.token("letter", (yy.left, yy.match()))

for _spelling in TOKEN_FOR:
	@lexicon.on(_escaped(_spelling))
	def _symbol(yy:IterableScanner): yy.token("symbol", (yy.left, yy.match()))

@lexicon.on(r"{ANY}")
def _bogon(yy:IterableScanner): yy.token("bogon", (yy.left, yy.match()))

def scan(text:str, start:int, memory:Memory) -> Iterator[tuple[int, Token]]:
	"""
	Yield (offset, token) pairs from text, beginning at offset start.
	Variables are looked up the moment they are scanned.
	Raises a PeachError, carrying the offending offset, for anything unscannable.
	"""
	for kind, (offset, lexeme) in IterableScanner(text, lexicon.get_dfa(), lexicon, start=None, at=start):
		if kind == "number":
			try: yield offset, parse_number(lexeme)
			except ValueError: raise ScanError("Could not parse number: %s" % lexeme, offset) from None
		elif kind == "letter":
			try: yield offset, memory.get(lexeme)
			except VariableError as ex: raise VariableError(ex.problem, offset) from None
		elif kind == "symbol":
			yield offset, token_for(lexeme)
		else:
			raise _bogus(text, offset, lexeme)

def _bogus(text:str, offset:int, lexeme:str):
	if lexeme.isalpha():
		return VariableError('"%s" is not a valid variable name' % lexeme, offset)
	pair = text[offset:offset+2]
	if len(pair) > 1:
		return ScanError("Could not parse %s or %s as token" % (lexeme, pair), offset)
	else:
		return ScanError("Could not parse %s as token" % lexeme, offset)
