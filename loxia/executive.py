"""
The overall control for a run: text in, side effects out.
Each phase files its troubles with the report; this is the one place
that decides to stop.
"""
from typing import Optional, TextIO
from .diagnostics import Report
from .environment import Environment
from .front_end import parse_text
from .interpreter import Interpreter
from .runtime import LoxRuntimeError

def run_text(
	text:str, report:Report, out:Optional[TextIO]=None,
	environment:Optional[Environment]=None, filename:Optional[str]=None,
) -> bool:
	"""
	Scan, parse, and run a program. Answer True if it ran to completion.
	A program with lexical or syntax errors never starts.
	"""
	report.set_source(text, filename)
	program = parse_text(text, report)
	if program is None or report.sick():
		return False
	report.info("Parsed %d statements." % len(program))
	interpreter = Interpreter(environment or Environment(), out)
	try:
		interpreter.run(program)
	except LoxRuntimeError as ex:
		report.runtime_error(ex)
		return False
	return True
