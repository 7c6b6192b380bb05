"""
The closed vocabulary of Peach tokens.

A token is either a Decimal (a number, scanned or computed) or a member of
one of the four enumerations below. Each enumeration's value is that token's
one canonical spelling, which serves both the scanner and the error messages.
The reducer dispatches on the class of a token, so the class is the "kind".
"""
from decimal import Decimal
from enum import Enum
from typing import Iterable, Union

from .primitive import render

class Separator(Enum):
	OPEN = "("
	CLOSE = ")"

class UnaryPrefixOp(Enum):
	NEGATE = "~"
	IS_POSSIBLE = "<>"
	IS_CERTAIN = "[]"

class UnaryPostfixOp(Enum):
	GET_ONE_PERCENT = "%"

class BinaryOp(Enum):
	IS_EQUAL = "="
	IS_LESS = "<"
	IS_MORE = ">"
	IS_NOT_EQUAL = "~="
	IS_LESS_OR_EQUAL = "<="
	IS_MORE_OR_EQUAL = ">="
	ADD = "+"
	ABS_DIFF = "-"
	MULTIPLY = "*"
	DIVIDE = "/"
	RAISE = "^"
	MIN = "!"
	AVG = "@"
	MAX = "#"
	DISJUNCT = "$"

Symbol = Union[Separator, UnaryPrefixOp, UnaryPostfixOp, BinaryOp]
Token = Union[Decimal, Symbol]

SYMBOL_KINDS = (Separator, UnaryPrefixOp, UnaryPostfixOp, BinaryOp)

TOKEN_FOR : dict[str, Symbol] = {member.value: member for kind in SYMBOL_KINDS for member in kind}

# Spelling must be a bijection, or the scanner could not tell two tokens apart.
assert len(TOKEN_FOR) == sum(len(kind) for kind in SYMBOL_KINDS)

def token_for(text:str) -> Symbol:
	""" Raises KeyError for anything not exactly a canonical spelling. """
	return TOKEN_FOR[text]

def spell(token:Token) -> str:
	if isinstance(token, Decimal): return render(token)
	else: return token.value

def spell_all(tokens:Iterable[Token]) -> str:
	return ''.join(map(spell, tokens))
