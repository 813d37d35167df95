"""
Diagnostics: the place where every phase of the pipeline files its complaints.

A Report is created by whoever drives the pipeline and handed to each phase.
Nothing here is global: two runs with two reports never see each other's issues.
"""
import sys, random
from typing import Optional
from boozetools.support.failureprone import SourceText, Issue, Evidence, Severity

from .ontology import Token, Phrase

class TooManyIssues(Exception):
	pass

SCANNING = "scanning"
PARSING = "parsing"
RUNNING = "running"

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Heavens', 'Nuts', 'Rats',
	]
	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I need to ask for help.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects issues from all phases. The replacement for a global "had error" flag. """
	_issues : list[Issue]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
		self._source = SourceText("")

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> tuple[Issue, ...]: return tuple(self._issues)

	def set_source(self, text:str, filename:Optional[str]=None):
		""" Remember the program text, so complaints can quote it. """
		self._source = SourceText(text, filename=filename)

	def issue(self, it:Issue):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def report(self, line:int, message:str, phase:str):
		""" The plain sink: a line number and a message, with no excerpt. """
		self.issue(Issue(phase, Severity.ERROR, "[line %d] %s"%(line, message), {}))

	def _blame(self, phase:str, message:str, where:slice, caption:str):
		self.issue(Issue(phase, Severity.ERROR, message, {None: [Evidence(where, caption)]}))

	# Methods the scanner calls:

	def unexpected_character(self, line:int, start:int, char:str):
		self._blame(SCANNING, "[line %d] Unexpected character %r."%(line, char), slice(start, start+1), "this one")

	def unterminated_string(self, line:int, start:int):
		self._blame(SCANNING, "[line %d] Unterminated string."%line, slice(start, start+1), "opens here")

	def unterminated_comment(self, line:int, start:int):
		self._blame(SCANNING, "[line %d] Unterminated block comment."%line, slice(start, start+2), "opens here")

	# Method the front-end calls:

	def parse_error(self, ex):
		token:Token = ex.token
		self._blame(PARSING, "[line %d] %s"%(token.line, ex.message()), slice(token.start, token.stop()), "got confused here")

	# Method the executive calls when the interpreter gives up:

	def runtime_error(self, ex):
		phrase:Phrase = ex.phrase
		if phrase is None:
			self.issue(Issue(RUNNING, Severity.ERROR, ex.message, {}))
			return
		self._blame(RUNNING, "[line %d] %s"%(phrase.line(), ex.message), phrase.span(), "")

	def _fetch(self, key) -> SourceText:
		return self._source

	def as_text(self) -> str:
		return "\n".join(i.as_text(self._fetch) for i in self._issues)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_outburst(), file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(self._fetch), file=sys.stderr)
		sys.stderr.flush()

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
