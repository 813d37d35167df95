"""
The set of parse-nodes in simple form.
The parser calls these constructors top-down as it recognizes each phrase.
Every node keeps hold of the tokens it came from, so that any later phase
can point at the offending bit of source text.
"""
from typing import Optional, Sequence
from .ontology import Phrase, Token

class Expr(Phrase):
	pass

class Stmt(Phrase):
	pass

###############################################################################
# Expressions

class Binary(Expr):
	def __init__(self, lhs:Expr, operator:Token, rhs:Expr):
		self.lhs, self.operator, self.rhs = lhs, operator, rhs
	def __repr__(self): return "<Binary %s>" % self.operator.lexeme
	def left(self): return self.lhs.left()
	def right(self): return self.rhs.right()

class Logical(Binary):
	""" Short-circuit and/or. Same shape as Binary but different evaluation. """
	def __repr__(self): return "<Logical %s>" % self.operator.lexeme

class Unary(Expr):
	def __init__(self, operator:Token, operand:Expr):
		self.operator, self.operand = operator, operand
	def left(self): return self.operator
	def right(self): return self.operand.right()

class Grouping(Expr):
	def __init__(self, paren:Token, inner:Expr, close:Token):
		self.paren, self.inner, self.close = paren, inner, close
	def left(self): return self.paren
	def right(self): return self.close

class Variable(Expr):
	def __init__(self, name:Token):
		self.name = name
	def __repr__(self): return "<ref:%s>" % self.name.payload
	def text(self) -> str: return self.name.payload
	def left(self): return self.name
	def right(self): return self.name

class Assignment(Expr):
	def __init__(self, name:Token, value:Expr):
		self.name, self.value = name, value
	def text(self) -> str: return self.name.payload
	def left(self): return self.name
	def right(self): return self.value.right()

class Literal(Expr):
	""" Base for the leaf expressions that stand for exactly one token. """
	def __init__(self, token:Token):
		self.token = token
	def left(self): return self.token
	def right(self): return self.token

class NumberLit(Literal):
	@property
	def value(self) -> float: return self.token.payload

class StringLit(Literal):
	@property
	def value(self) -> str: return self.token.payload

class Boolean(Literal):
	@property
	def value(self) -> bool: return self.token.kind == "TRUE"

class Nil(Literal):
	value = None

###############################################################################
# Statements

class ExprStmt(Stmt):
	def __init__(self, expr:Expr, semicolon:Token):
		self.expr, self._semicolon = expr, semicolon
	def left(self): return self.expr.left()
	def right(self): return self._semicolon

class PrintStmt(Stmt):
	def __init__(self, keyword:Token, expr:Expr, semicolon:Token):
		self._keyword, self.expr, self._semicolon = keyword, expr, semicolon
	def left(self): return self._keyword
	def right(self): return self._semicolon

class VarDecl(Stmt):
	def __init__(self, keyword:Token, name:Token, initializer:Optional[Expr], semicolon:Token):
		self._keyword, self.name, self.initializer, self._semicolon = keyword, name, initializer, semicolon
	def text(self) -> str: return self.name.payload
	def left(self): return self._keyword
	def right(self): return self._semicolon

class Block(Stmt):
	def __init__(self, opening:Token, statements:Sequence[Stmt], closing:Token):
		self._opening, self.statements, self._closing = opening, statements, closing
	def left(self): return self._opening
	def right(self): return self._closing

class IfStmt(Stmt):
	def __init__(self, keyword:Token, condition:Expr, then_branch:Block, else_branch:Optional[Block]):
		self._keyword = keyword
		self.condition, self.then_branch, self.else_branch = condition, then_branch, else_branch
	def left(self): return self._keyword
	def right(self): return (self.else_branch or self.then_branch).right()

class WhileStmt(Stmt):
	def __init__(self, keyword:Token, condition:Expr, body:Block):
		self._keyword, self.condition, self.body = keyword, condition, body
	def left(self): return self._keyword
	def right(self): return self.body.right()
