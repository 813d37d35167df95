"""
The run-time value model.

Basic primitive values play themselves:
	Number -> float, String -> str, Bool -> bool, Null -> None.

Python's own operators are almost right, but not quite:
True == 1.0 in Python, ordering None raises, and float division
by zero raises instead of going to infinity. The functions here
apply the language's rules on top of the native operations.
"""
import math
import operator
from decimal import Decimal
from typing import Union, Callable
from .ontology import Phrase

VALUE = Union[float, str, bool, None]

class LoxRuntimeError(Exception):
	""" Anything that stops a running program. Carries the phrase to blame. """
	def __init__(self, phrase:Phrase, message:str):
		super().__init__(phrase, message)
		self.phrase = phrase
		self.message = message
	def __str__(self):
		if self.phrase is None: return self.message
		return "[line %d] %s" % (self.phrase.line(), self.message)

class LoxTypeError(LoxRuntimeError):
	pass

class UndefinedVariable(LoxRuntimeError):
	def __init__(self, phrase:Phrase, name:str):
		super().__init__(phrase, "Undefined variable '%s'." % name)
		self.name = name

class ScopeError(LoxRuntimeError):
	pass

KIND_NAMES = {float: "number", str: "string", bool: "boolean", type(None): "nil"}

def kind_of(value:VALUE) -> type:
	kind = type(value)
	assert kind in KIND_NAMES, value
	return kind

def type_name(value:VALUE) -> str:
	return KIND_NAMES[kind_of(value)]

def values_equal(a:VALUE, b:VALUE) -> bool:
	return kind_of(a) is kind_of(b) and a == b

def _describe(*operands) -> str:
	return " and ".join(type_name(v) for v in operands)

###############################################################################

def _divide(a:float, b:float) -> float:
	try: return a / b
	except ZeroDivisionError:
		if a == 0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)

ARITHMETIC : dict[str, Callable[[float, float], float]] = {
	"-": operator.sub,
	"*": operator.mul,
	"/": _divide,
}

def add(a:VALUE, b:VALUE, site:Phrase) -> VALUE:
	kind = kind_of(a)
	if kind is kind_of(b) and kind in (float, str):
		return a + b
	raise LoxTypeError(site, "Operands of '+' must be two numbers or two strings, not %s." % _describe(a, b))

def arithmetic(op:str, a:VALUE, b:VALUE, site:Phrase) -> float:
	if kind_of(a) is float and kind_of(b) is float:
		return ARITHMETIC[op](a, b)
	raise LoxTypeError(site, "Operands of '%s' must be numbers, not %s." % (op, _describe(a, b)))

def negate(a:VALUE, site:Phrase) -> float:
	if kind_of(a) is float: return -a
	raise LoxTypeError(site, "Operand of '-' must be a number, not %s." % type_name(a))

def logical_not(a:VALUE, site:Phrase) -> bool:
	if kind_of(a) is bool: return not a
	raise LoxTypeError(site, "Operand of '!' must be a boolean, not %s." % type_name(a))

RELATIONS : dict[str, Callable[[VALUE, VALUE], bool]] = {
	"<": operator.lt,
	"<=": operator.le,
	">": operator.gt,
	">=": operator.ge,
}

def compare(op:str, a:VALUE, b:VALUE, site:Phrase) -> bool:
	kind = kind_of(a)
	if kind is not kind_of(b):
		raise LoxTypeError(site, "Cannot compare %s with '%s'." % (_describe(a, b), op))
	if kind is type(None):
		# There is only one nil, and it is equal to itself.
		return op in ("<=", ">=")
	return RELATIONS[op](a, b)

def is_truthy(value:VALUE, site:Phrase) -> bool:
	""" Only a boolean may decide a condition. """
	if kind_of(value) is bool: return value
	raise LoxTypeError(site, "Condition must be a boolean, not %s." % type_name(value))

###############################################################################

def format_number(n:float) -> str:
	if math.isnan(n): return "NaN"
	if math.isinf(n): return "inf" if n > 0 else "-inf"
	# Shortest round-trip digits, written out positionally.
	text = format(Decimal(repr(n)), "f")
	return text[:-2] if text.endswith(".0") else text

def display(value:VALUE) -> str:
	""" The text a print statement writes. """
	kind = kind_of(value)
	if kind is float: return format_number(value)
	if kind is bool: return "true" if value else "false"
	if value is None: return ""
	return value
