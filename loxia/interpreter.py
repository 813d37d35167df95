"""
The tree-walking evaluator.

Statements run strictly in order against one Environment.
The first runtime error stops everything; it propagates out of run()
untouched, and whatever was already printed or assigned stays that way.
"""
import sys
from typing import Sequence, TextIO
from boozetools.support.foundation import Visitor
from . import syntax, runtime
from .environment import Environment
from .runtime import VALUE, UndefinedVariable

class Interpreter(Visitor):
	def __init__(self, environment:Environment, out:TextIO=None):
		self.environment = environment
		self.out = out or sys.stdout

	def run(self, program:Sequence[syntax.Stmt]):
		for stmt in program:
			self.execute(stmt)

	def execute(self, stmt:syntax.Stmt):
		self.visit(stmt)

	def evaluate(self, expr:syntax.Expr) -> VALUE:
		return self.visit(expr)

	# Statements:

	def visit_ExprStmt(self, stmt:syntax.ExprStmt):
		self.evaluate(stmt.expr)

	def visit_PrintStmt(self, stmt:syntax.PrintStmt):
		print(runtime.display(self.evaluate(stmt.expr)), file=self.out)

	def visit_VarDecl(self, stmt:syntax.VarDecl):
		value = None if stmt.initializer is None else self.evaluate(stmt.initializer)
		self.environment.define(stmt.text(), value)

	def visit_Block(self, block:syntax.Block):
		self.environment.push_scope()
		try:
			for stmt in block.statements:
				self.execute(stmt)
		finally:
			self.environment.pop_scope(block)

	def visit_IfStmt(self, stmt:syntax.IfStmt):
		if runtime.is_truthy(self.evaluate(stmt.condition), stmt.condition):
			self.execute(stmt.then_branch)
		elif stmt.else_branch is not None:
			self.execute(stmt.else_branch)

	def visit_WhileStmt(self, stmt:syntax.WhileStmt):
		while runtime.is_truthy(self.evaluate(stmt.condition), stmt.condition):
			self.execute(stmt.body)

	# Expressions:

	def visit_Literal(self, expr:syntax.Literal) -> VALUE:
		return expr.value

	def visit_Grouping(self, expr:syntax.Grouping) -> VALUE:
		return self.evaluate(expr.inner)

	def visit_Variable(self, expr:syntax.Variable) -> VALUE:
		name = expr.text()
		if not self.environment.holds(name): raise UndefinedVariable(expr, name)
		return self.environment.get(name)

	def visit_Assignment(self, expr:syntax.Assignment) -> VALUE:
		value = self.evaluate(expr.value)
		return self.environment.assign(expr.text(), value, expr)

	def visit_Unary(self, expr:syntax.Unary) -> VALUE:
		operand = self.evaluate(expr.operand)
		if expr.operator.kind == "-": return runtime.negate(operand, expr)
		assert expr.operator.kind == "!", expr.operator
		return runtime.logical_not(operand, expr)

	def visit_Binary(self, expr:syntax.Binary) -> VALUE:
		a = self.evaluate(expr.lhs)
		b = self.evaluate(expr.rhs)
		op = expr.operator.kind
		if op == "+": return runtime.add(a, b, expr)
		if op in runtime.ARITHMETIC: return runtime.arithmetic(op, a, b, expr)
		if op == "==": return runtime.values_equal(a, b)
		if op == "!=": return not runtime.values_equal(a, b)
		return runtime.compare(op, a, b, expr)

	def visit_Logical(self, expr:syntax.Logical) -> VALUE:
		lhs = self.evaluate(expr.lhs)
		stop_on = expr.operator.kind == "OR"
		if runtime.is_truthy(lhs, expr.lhs) == stop_on: return lhs
		return self.evaluate(expr.rhs)
