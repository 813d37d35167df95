"""
Debug rendering of the syntax tree in parenthesized prefix form,
e.g. "!3 == 4" comes out as "(== (! 3) 4)".
"""
from typing import Sequence
from boozetools.support.foundation import Visitor
from . import syntax
from .runtime import format_number

class AstPrinter(Visitor):

	def print_program(self, program:Sequence[syntax.Stmt]) -> str:
		return "\n".join(map(self.print_stmt, program))

	def print_stmt(self, stmt:syntax.Stmt) -> str: return self.visit(stmt)
	def print_expr(self, expr:syntax.Expr) -> str: return self.visit(expr)

	def _parenthesize(self, name:str, *parts) -> str:
		words = [name]
		for p in parts:
			words.append(p if isinstance(p, str) else self.visit(p))
		return "(" + " ".join(words) + ")"

	def visit_ExprStmt(self, stmt:syntax.ExprStmt): return self._parenthesize("expr", stmt.expr)
	def visit_PrintStmt(self, stmt:syntax.PrintStmt): return self._parenthesize("print", stmt.expr)

	def visit_VarDecl(self, stmt:syntax.VarDecl):
		if stmt.initializer is None: return self._parenthesize("var", stmt.text())
		return self._parenthesize("var", stmt.text(), stmt.initializer)

	def visit_Block(self, block:syntax.Block): return self._parenthesize("block", *block.statements)

	def visit_IfStmt(self, stmt:syntax.IfStmt):
		parts = [stmt.condition, stmt.then_branch]
		if stmt.else_branch is not None: parts.append(stmt.else_branch)
		return self._parenthesize("if", *parts)

	def visit_WhileStmt(self, stmt:syntax.WhileStmt): return self._parenthesize("while", stmt.condition, stmt.body)

	def visit_Binary(self, expr:syntax.Binary): return self._parenthesize(expr.operator.lexeme, expr.lhs, expr.rhs)
	def visit_Unary(self, expr:syntax.Unary): return self._parenthesize(expr.operator.lexeme, expr.operand)
	def visit_Grouping(self, expr:syntax.Grouping): return self._parenthesize("group", expr.inner)
	def visit_Assignment(self, expr:syntax.Assignment): return self._parenthesize("=", expr.text(), expr.value)
	def visit_Variable(self, expr:syntax.Variable): return expr.text()

	def visit_NumberLit(self, expr:syntax.NumberLit): return format_number(expr.value)
	def visit_StringLit(self, expr:syntax.StringLit): return expr.value
	def visit_Boolean(self, expr:syntax.Boolean): return "true" if expr.value else "false"
	def visit_Nil(self, expr:syntax.Nil): return "nil"
