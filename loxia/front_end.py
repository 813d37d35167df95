"""
Recursive-descent parser. Tokens in, a list of statements out.

The first syntax error ends the parse: there is no recovery,
and no partial program is ever handed back.
"""
from typing import Optional, Union
from boozetools.parsing.interface import ParseError, END_OF_TOKENS
from .ontology import Token, IDENTIFIER, STRING, NUMBER, is_end
from .diagnostics import Report
from .scanner import scan
from . import syntax

class LoxParseError(ParseError):
	token: Token
	def message(self) -> str: raise NotImplementedError(type(self))

class UnexpectedToken(LoxParseError):
	def __init__(self, token:Token, expectation:str):
		super().__init__(token, expectation)
		self.token, self.expectation = token, expectation
	def message(self):
		found = "end of input" if is_end(self.token) else "'%s'"%self.token.lexeme
		return "Expected %s, but found %s." % (self.expectation, found)

class NonValidAssignmentTarget(LoxParseError):
	def __init__(self, token:Token, target:syntax.Expr):
		super().__init__(token, target)
		self.token, self.target = token, target
	def message(self): return "Only a plain variable can be assigned to."

EQUALITY = ("!=", "==")
COMPARISON = (">", ">=", "<", "<=")
TERM = ("-", "+")
FACTOR = ("/", "*")
UNARY = ("!", "-")

class Parser:
	def __init__(self, tokens:list[Token]):
		assert tokens and is_end(tokens[-1]), "Token stream must end with %s" % END_OF_TOKENS
		self._tokens = tokens
		self._current = 0

	# Public API:

	def parse(self) -> list[syntax.Stmt]:
		""" program := declaration* end-marker """
		statements = []
		while not self._at_end():
			statements.append(self._declaration())
		return statements

	def parse_expression(self) -> syntax.Expr:
		""" A lone expression filling the whole token stream. """
		expr = self._expression()
		self._expect(END_OF_TOKENS, "end of input")
		return expr

	# Token-stream utilities:

	def _peek(self) -> Token: return self._tokens[self._current]
	def _at_end(self) -> bool: return is_end(self._peek())
	def _check(self, *kinds) -> bool: return self._peek().kind in kinds

	def _advance(self) -> Token:
		token = self._peek()
		if not is_end(token): self._current += 1
		return token

	def _match(self, *kinds) -> Optional[Token]:
		if self._check(*kinds): return self._advance()

	def _expect(self, kind:str, expectation:str) -> Token:
		if self._check(kind): return self._advance()
		raise UnexpectedToken(self._peek(), expectation)

	# Statements:

	def _declaration(self) -> syntax.Stmt:
		keyword = self._match("VAR")
		if keyword: return self._var_declaration(keyword)
		return self._statement()

	def _var_declaration(self, keyword:Token) -> syntax.VarDecl:
		name = self._expect(IDENTIFIER, "a variable name after 'var'")
		initializer = self._expression() if self._match("=") else None
		semicolon = self._expect(";", "';' after variable declaration")
		return syntax.VarDecl(keyword, name, initializer, semicolon)

	def _statement(self) -> syntax.Stmt:
		if self._check("PRINT"): return self._print_statement()
		if self._check("IF"): return self._if_statement()
		if self._check("WHILE"): return self._while_statement()
		if self._check("{"): return self._block()
		expr = self._expression()
		return syntax.ExprStmt(expr, self._expect(";", "';' after expression"))

	def _print_statement(self) -> syntax.PrintStmt:
		keyword = self._advance()
		expr = self._expression()
		return syntax.PrintStmt(keyword, expr, self._expect(";", "';' after value"))

	def _block(self) -> syntax.Block:
		""" block := "{" declaration* "}" """
		opening = self._expect("{", "'{' to begin a block")
		statements = []
		while not self._check("}"):
			if self._at_end(): raise UnexpectedToken(self._peek(), "'}' to close the block")
			statements.append(self._declaration())
		return syntax.Block(opening, statements, self._advance())

	def _condition(self, keyword:Token) -> syntax.Expr:
		self._expect("(", "'(' after '%s'" % keyword.lexeme)
		condition = self._expression()
		self._expect(")", "')' after condition")
		return condition

	def _if_statement(self) -> syntax.IfStmt:
		keyword = self._advance()
		condition = self._condition(keyword)
		then_branch = self._block()
		else_branch = self._block() if self._match("ELSE") else None
		return syntax.IfStmt(keyword, condition, then_branch, else_branch)

	def _while_statement(self) -> syntax.WhileStmt:
		keyword = self._advance()
		condition = self._condition(keyword)
		return syntax.WhileStmt(keyword, condition, self._block())

	# Expressions, lowest precedence first:

	def _expression(self) -> syntax.Expr:
		return self._assignment()

	def _assignment(self) -> syntax.Expr:
		# Parse the candidate target as an ordinary expression,
		# then reject it only if an "=" follows and it is not a variable.
		expr = self._logic_or()
		equals = self._match("=")
		if equals is None: return expr
		value = self._assignment()
		if isinstance(expr, syntax.Variable):
			return syntax.Assignment(expr.name, value)
		raise NonValidAssignmentTarget(equals, expr)

	def _logic_or(self) -> syntax.Expr:
		expr = self._logic_and()
		while True:
			operator = self._match("OR")
			if operator is None: return expr
			expr = syntax.Logical(expr, operator, self._logic_and())

	def _logic_and(self) -> syntax.Expr:
		expr = self._equality()
		while True:
			operator = self._match("AND")
			if operator is None: return expr
			expr = syntax.Logical(expr, operator, self._equality())

	def _binary_level(self, operand, operators) -> syntax.Expr:
		expr = operand()
		while True:
			operator = self._match(*operators)
			if operator is None: return expr
			expr = syntax.Binary(expr, operator, operand())

	def _equality(self): return self._binary_level(self._comparison, EQUALITY)
	def _comparison(self): return self._binary_level(self._term, COMPARISON)
	def _term(self): return self._binary_level(self._factor, TERM)
	def _factor(self): return self._binary_level(self._unary, FACTOR)

	def _unary(self) -> syntax.Expr:
		operator = self._match(*UNARY)
		if operator: return syntax.Unary(operator, self._unary())
		return self._primary()

	def _primary(self) -> syntax.Expr:
		token = self._peek()
		kind = token.kind
		if kind == NUMBER: return syntax.NumberLit(self._advance())
		if kind == STRING: return syntax.StringLit(self._advance())
		if kind in ("TRUE", "FALSE"): return syntax.Boolean(self._advance())
		if kind == "NIL": return syntax.Nil(self._advance())
		if kind == IDENTIFIER: return syntax.Variable(self._advance())
		if kind == "(":
			paren = self._advance()
			inner = self._expression()
			close = self._expect(")", "')' after expression")
			return syntax.Grouping(paren, inner, close)
		raise UnexpectedToken(token, "an expression")

###############################################################################

def parse_text(text:str, report:Report) -> Optional[list[syntax.Stmt]]:
	""" Scan and parse a program; on a syntax error, file it with the report and answer None. """
	return _front_end(text, report, Parser.parse)

def parse_expression_text(text:str, report:Report) -> Optional[syntax.Expr]:
	return _front_end(text, report, Parser.parse_expression)

def _front_end(text, report, method) -> Union[None, list, syntax.Expr]:
	tokens = scan(text, report)
	report.info("Scanned %d tokens." % len(tokens))
	try:
		return method(Parser(tokens))
	except LoxParseError as ex:
		report.parse_error(ex)
