"""
Source text in, tokens out.

One left-to-right pass with a single character of lookahead.
Lexical problems go to the report; the scanner always carries on
and always finishes with exactly one end-of-tokens marker.
"""
import sys
from boozetools.parsing.interface import END_OF_TOKENS
from .ontology import Token, IDENTIFIER, STRING, NUMBER, RESERVED, SINGLE, SEEDS, keyword_kind
from .diagnostics import Report

WHITESPACE = frozenset(" \t\r")

def _is_digit(c:str) -> bool: return "0" <= c <= "9"
def _starts_word(c:str) -> bool: return c.isalpha() or c == "_"
def _continues_word(c:str) -> bool: return c.isalnum() or c == "_"

class Scanner:
	def __init__(self, source:str, report:Report):
		self._source = source
		self._report = report
		self._tokens = []
		self._start = 0
		self._current = 0
		self._line = 1

	def scan_tokens(self) -> list[Token]:
		while not self._at_end():
			self._start = self._current
			self._scan_token()
		self._tokens.append(Token(END_OF_TOKENS, "", self._line, None, len(self._source)))
		return self._tokens

	def _at_end(self): return self._current >= len(self._source)

	def _advance(self) -> str:
		c = self._source[self._current]
		self._current += 1
		return c

	def _peek(self) -> str:
		return "" if self._at_end() else self._source[self._current]

	def _peek_next(self) -> str:
		i = self._current + 1
		return "" if i >= len(self._source) else self._source[i]

	def _match(self, expected:str) -> bool:
		if self._peek() == expected:
			self._current += 1
			return True
		return False

	def _lexeme(self) -> str: return self._source[self._start:self._current]

	def _emit(self, kind:str, payload=None):
		self._tokens.append(Token(kind, self._lexeme(), self._line, payload, self._start))

	def _scan_token(self):
		c = self._advance()
		if c in WHITESPACE: return
		if c == "\n":
			self._line += 1
		elif c == "/":
			if self._match("/"): self._line_comment()
			elif self._match("*"): self._block_comment()
			else: self._emit(c)
		elif c in SINGLE:
			self._emit(c)
		elif c in SEEDS:
			self._emit(sys.intern(c+"=") if self._match("=") else c)
		elif c == '"':
			self._string()
		elif _is_digit(c):
			self._number()
		elif _starts_word(c):
			self._word()
		else:
			self._report.unexpected_character(self._line, self._start, c)

	def _line_comment(self):
		while self._peek() not in ("\n", ""): self._current += 1

	def _block_comment(self):
		opening_line = self._line
		while not self._at_end():
			if self._peek() == "*" and self._peek_next() == "/":
				self._current += 2
				return
			if self._advance() == "\n": self._line += 1
		self._report.unterminated_comment(opening_line, self._start)

	def _string(self):
		opening_line = self._line
		while self._peek() not in ('"', ""):
			if self._advance() == "\n": self._line += 1
		if self._at_end():
			self._report.unterminated_string(opening_line, self._start)
			return
		self._current += 1  # The closing quote
		text = self._source[self._start+1:self._current-1]
		self._tokens.append(Token(STRING, self._lexeme(), opening_line, text, self._start))

	def _number(self):
		while _is_digit(self._peek()): self._current += 1
		if self._peek() == "." and _is_digit(self._peek_next()):
			self._current += 1
			while _is_digit(self._peek()): self._current += 1
		self._emit(NUMBER, float(self._lexeme()))

	def _word(self):
		while _continues_word(self._peek()): self._current += 1
		word = self._lexeme()
		if word in RESERVED: self._emit(keyword_kind(word))
		else: self._emit(IDENTIFIER, sys.intern(word))

def scan(source:str, report:Report) -> list[Token]:
	return Scanner(source, report).scan_tokens()
