"""
This is an interpreter for the Loxia scripting language.

{0}

For example:

    loxia program.lox

will run program.lox if possible, or else try to explain why not.

    loxia -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="loxia",
	description="Interpreter for the Loxia scripting language.",
)
parser.add_argument("program", help="path to a Loxia source file.")
parser.add_argument('-c', "--check", action="store_true", help="Scan and parse the program but do not actually run it.")
parser.add_argument('-a', "--ast", action="store_true", help="Print the parse tree instead of running the program.")
parser.add_argument('-v', "--verbose", action="count", help="Say a little about each phase on the way through.")

def run(args) -> int:
	from .diagnostics import Report, TooManyIssues
	from .executive import run_text
	from .front_end import parse_text
	report = Report(verbose=args.verbose)
	path = Path.cwd() / args.program
	try:
		text = path.read_text(encoding="utf-8")
	except OSError as ex:
		print("I see no readable file called %s (%s)" % (path, ex.strerror), file=sys.stderr)
		return 1
	report.set_source(text, str(path))
	try:
		if args.check or args.ast:
			program = parse_text(text, report)
			if report.ok() and args.ast:
				from .printer import AstPrinter
				print(AstPrinter().print_program(program))
		else:
			run_text(text, report, filename=str(path))
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
