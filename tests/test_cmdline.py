import io, json, tempfile
from pathlib import Path
import unittest
from unittest import mock

from tsprinter import cmdline
from tsprinter.primitive import STRING
from tsprinter.syntax import Program, TypeAliasDecl, EnumDecl

DOCUMENT = {"statements": [
	{"alias": "Id", "export": True, "target": {"union": ["string", "number"]}},
	{"enum": "E", "entries": ["A"]},
]}

class CommandLineTests(unittest.TestCase):

	def setUp(self) -> None:
		self._tmp = tempfile.TemporaryDirectory()
		self.folder = Path(self._tmp.name)

	def tearDown(self) -> None:
		self._tmp.cleanup()

	def _write(self, name, text) -> str:
		path = self.folder / name
		path.write_text(text, encoding="utf-8")
		return str(path)

	def _run(self, *argv):
		args = cmdline.parser.parse_args(list(argv))
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
				status = cmdline.run(args)
		return status, out.getvalue(), err.getvalue()

	def test_prints_to_standard_output(self):
		status, out, err = self._run(self._write("d.json", json.dumps(DOCUMENT)))
		self.assertEqual(0, status)
		self.assertEqual("export type Id = string | number\n\nenum E {\n  A\n}\n", out)
		self.assertEqual("", err)

	def test_options(self):
		source = self._write("d.json", json.dumps(DOCUMENT))
		target = self.folder / "d.d.ts"
		status, out, err = self._run(source, "-o", str(target), "-i", "2", "-s", "-v")
		self.assertEqual(0, status)
		self.assertEqual("", out)
		self.assertIn("Wrote 2 statement(s)", err)
		self.assertEqual("  export type Id = string | number;\n\n  enum E {\n    A\n  }\n", target.read_text(encoding="utf-8"))

	def test_missing_file(self):
		status, out, err = self._run(str(self.folder / "nope.json"))
		self.assertEqual(1, status)
		self.assertIn("pear-shaped", err)

	def test_bad_json(self):
		status, out, err = self._run(self._write("d.json", "{statements"))
		self.assertEqual(1, status)
		self.assertEqual("", out)

	def test_bad_description(self):
		status, out, err = self._run(self._write("d.json", json.dumps({"statements": [{"alias": "A", "target": "B"}]})))
		self.assertEqual(1, status)
		self.assertIn("statements[0].target", err)

	def test_too_many_issues(self):
		document = {"statements": [{"alias": "T%d" % i, "target": "Nope"} for i in range(20)]}
		status, out, err = self._run(self._write("d.json", json.dumps(document)))
		self.assertEqual(1, status)
		self.assertIn("Giving up", err)

	def test_no_arguments_prints_usage(self):
		with mock.patch("sys.argv", ["tsprinter"]):
			with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
				cmdline.main()
		self.assertIn("usage: tsprinter", out.getvalue())

class RenderProgramTests(unittest.TestCase):

	def test_final_newline(self):
		self.assertEqual("\n", cmdline.render_program(Program()))

	def test_semicolons_only_after_aliases(self):
		program = Program([TypeAliasDecl("T", STRING), EnumDecl("E")])
		self.assertEqual("type T = string;\n\nenum E {\n\n}\n", cmdline.render_program(program, semicolons=True))

if __name__ == '__main__':
	unittest.main()
