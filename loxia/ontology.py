"""
The vocabulary shared by scanner, parser, interpreter and printer.

Token kinds are plain interned strings, in the style of a table-driven scanner:
punctuation stands for itself, reserved words are their upper-cased spelling,
and the three literal-bearing kinds have lower-case-looking names of their own.
"""
from typing import NamedTuple, Any
from boozetools.parsing.interface import END_OF_TOKENS

IDENTIFIER = "IDENTIFIER"
STRING = "STRING"
NUMBER = "NUMBER"

RESERVED = frozenset("""
	and class else false fun for if nil or print return super this true var while
""".split())

SINGLE = frozenset("(){},.-+;*/")
# The seeds of two-character operators: each may stand alone or take a trailing "=".
SEEDS = frozenset("!=<>")

class Token(NamedTuple):
	kind: str
	lexeme: str
	line: int
	payload: Any = None
	start: int = 0

	def stop(self) -> int: return self.start + len(self.lexeme)

	def __repr__(self):
		if self.payload is None: return "<%s line %d>" % (self.kind, self.line)
		return "<%s %r line %d>" % (self.kind, self.payload, self.line)

def keyword_kind(word:str) -> str:
	return word.upper()

def is_end(token:Token) -> bool:
	return token.kind == END_OF_TOKENS

class Phrase:
	"""
	Anything in the syntax tree that can be blamed for something.
	A phrase knows its leftmost and rightmost tokens, which is enough
	to point at it in the source text.
	"""
	def left(self) -> Token:
		raise NotImplementedError(type(self))
	def right(self) -> Token:
		raise NotImplementedError(type(self))
	def line(self) -> int: return self.left().line
	def span(self) -> slice: return slice(self.left().start, self.right().stop())
