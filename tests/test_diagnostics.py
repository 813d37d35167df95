import io
import os
import tempfile
import unittest
from unittest import mock

from loxia.diagnostics import Report, TooManyIssues, SCANNING, RUNNING
from loxia.executive import run_text
from loxia.scanner import scan
from loxia import cmdline

class ReportTests(unittest.TestCase):

	def test_starts_healthy(self):
		report = Report()
		assert report.ok() and not report.sick()
		self.assertEqual((), report.issues)

	def test_plain_sink(self):
		report = Report()
		report.report(3, "Something odd.", RUNNING)
		assert report.sick()
		self.assertEqual("[line 3] Something odd.", report.issues[0].description)
		self.assertEqual("running", report.issues[0].phase)
		report.reset()
		assert report.ok()

	def test_plain_sink_needs_a_phase(self):
		with self.assertRaises(TypeError):
			Report().report(3, "Something odd.")

	def test_too_many_issues(self):
		report = Report(max_issues=2)
		with self.assertRaises(TooManyIssues):
			scan("@ # $", report)

	def test_excerpt_points_at_the_culprit(self):
		report = Report()
		run_text('var a = 1;\nprint a + "b";\n', report, io.StringIO())
		text = report.as_text()
		self.assertIn("Error while running: [line 2] Operands of '+'", text)
		self.assertIn('print a + "b";', text)
		self.assertIn("^^^^^^^", text)

	def test_excerpt_for_parse_error_at_end(self):
		report = Report()
		run_text("print 1", report, io.StringIO())
		self.assertIn("Error while parsing", report.as_text())

	def test_complain_to_console_uses_stderr(self):
		report = Report()
		report.report(1, "Boom.", SCANNING)
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			report.complain_to_console()
		self.assertIn("[line 1] Boom.", err.getvalue())

	def test_assert_no_issues(self):
		report = Report()
		report.assert_no_issues("Nothing to see.")
		report.report(1, "Boom.", SCANNING)
		with mock.patch("sys.stderr", new_callable=io.StringIO):
			with self.assertRaises(AssertionError):
				report.assert_no_issues("Should fail.")

	def test_info_only_when_verbose(self):
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			Report(verbose=0).info("quiet")
			Report(verbose=1).info("loud")
		self.assertEqual("loud\n", err.getvalue())

class CommandLineTests(unittest.TestCase):

	def setUp(self) -> None:
		fd, self.path = tempfile.mkstemp(suffix=".lox")
		os.close(fd)

	def tearDown(self) -> None:
		os.remove(self.path)

	def _invoke(self, source, *flags):
		with open(self.path, "w", encoding="utf-8") as fh:
			fh.write(source)
		args = cmdline.parser.parse_args([*flags, self.path])
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
				status = cmdline.run(args)
		return status, out.getvalue(), err.getvalue()

	def test_runs_a_program(self):
		status, out, err = self._invoke("var x = 3; { var x = 4; print x; } print x;")
		self.assertEqual(0, status)
		self.assertEqual("4\n3\n", out)

	def test_runtime_error_status(self):
		status, out, err = self._invoke('print "a"; x = 5;')
		self.assertEqual(1, status)
		self.assertEqual("a\n", out)
		self.assertIn("Undefined variable 'x'", err)

	def test_check_does_not_run(self):
		status, out, err = self._invoke('print "a";', "--check")
		self.assertEqual(0, status)
		self.assertEqual("", out)
		self.assertIn("Looks plausible", err)

	def test_ast_flag(self):
		status, out, err = self._invoke("print !3 == 4;", "-a")
		self.assertEqual(0, status)
		self.assertEqual("(print (== (! 3) 4))\n", out)

	def test_syntax_error(self):
		status, out, err = self._invoke("print (1;", "-c")
		self.assertEqual(1, status)
		self.assertIn("Error while parsing", err)

	def test_missing_file(self):
		args = cmdline.parser.parse_args([self.path + ".nope"])
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			self.assertEqual(1, cmdline.run(args))
		self.assertIn("I see no readable file", err.getvalue())

if __name__ == '__main__':
	unittest.main()
