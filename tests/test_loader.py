import unittest

from tsprinter.diagnostics import Report, TooManyIssues
from tsprinter.loader import load_program, LoadError
from tsprinter import syntax, primitive

SPECIMEN = {"statements": [
	{"enum": "Color", "export": True, "comment": "Paint", "entries": ["Red", {"name": "Green", "value": "'green'"}]},
	{"alias": "Pick", "target": {"union": ["Square", {"literal": "none"}]}},
	{"interface": "Shape", "properties": [
		{"name": "color", "type": "Color", "comment": "What color to paint it"},
	]},
	{"interface": "Square", "extends": ["Shape"], "properties": [
		{"name": "side", "type": {"intersection": [
			{"object": [{"name": "length", "type": "number"}]},
			{"object": [{"name": "length", "type": {"ref": "Pick"}}]},
		]}},
	]},
]}

EXPECT = """/** Paint */
export enum Color {
  Red,
  Green = 'green'
}

type Pick = Square | 'none'

interface Shape {
  /** What color to paint it */
  color: Color
}

interface Square extends Shape {
  side: {
    length: number & Pick
  }
}"""

def _bad(document, max_issues=10) -> Report:
	report = Report(verbose=0, max_issues=max_issues)
	try: load_program(document, report)
	except LoadError: return report
	raise AssertionError("Should not have loaded")

class LoaderTests(unittest.TestCase):

	def test_specimen(self):
		report = Report(verbose=0)
		program = load_program(SPECIMEN, report)
		report.assert_no_issues("The specimen should load.")
		self.assertEqual(EXPECT, program.print())

	def test_forward_references_resolve_to_the_declaration(self):
		program = load_program(SPECIMEN, Report(verbose=0))
		color, pick, shape, square = program.statements
		self.assertIs(square, pick.target.members[0])
		self.assertIs(color, shape.definition.properties[0].value)
		self.assertEqual([shape], square.extends)

	def test_keywords_are_the_shared_primitives(self):
		program = load_program({"statements": [{"alias": "T", "target": "boolean"}]}, Report(verbose=0))
		self.assertIs(primitive.BOOLEAN, program.statements[0].target)

	def test_empty_document(self):
		program = load_program({}, Report(verbose=0))
		self.assertIsInstance(program, syntax.Program)
		self.assertEqual("", program.print())

	def test_undefined_name(self):
		report = _bad({"statements": [{"alias": "T", "target": {"union": ["string", "Nope"]}}]})
		self.assertEqual(1, len(report.issues))
		self.assertEqual("statements[0].target.union[1]", report.issues[0].path)
		self.assertIn("Nope", report.issues[0].message)

	def test_export_must_be_a_flag(self):
		report = _bad({"statements": [{"alias": "A", "target": "string", "export": "false"}]})
		self.assertEqual(1, len(report.issues))
		self.assertEqual("statements[0].export", report.issues[0].path)

	def test_export_flag(self):
		program = load_program({"statements": [{"enum": "E", "export": True}, {"enum": "F", "export": False}]}, Report(verbose=0))
		self.assertEqual([True, False], [s.export for s in program.statements])

	def test_redefined(self):
		report = _bad({"statements": [{"enum": "E"}, {"alias": "E", "target": "string"}]})
		self.assertEqual("statements[1]", report.issues[0].path)
		self.assertIn("statements[0]", report.issues[0].message)

	def test_extending_a_non_interface(self):
		report = _bad({"statements": [{"enum": "E"}, {"interface": "I", "extends": ["E"]}]})
		self.assertEqual("statements[1].extends[0]", report.issues[0].path)

	def test_assorted_bogons(self):
		for bogon in [
			[],
			{"statements": {}},
			{"statements": [7]},
			{"statements": [{"what": "is this"}]},
			{"statements": [{"enum": "E", "alias": "A"}]},
			{"statements": [{"enum": 3}]},
			{"statements": [{"enum": "E", "entries": [5]}]},
			{"statements": [{"enum": "E", "entries": [{"name": "A", "value": 1}]}]},
			{"statements": [{"alias": "A"}]},
			{"statements": [{"alias": "A", "target": 12}]},
			{"statements": [{"alias": "A", "target": {"literal": 12}}]},
			{"statements": [{"alias": "A", "target": {"tuple": []}}]},
			{"statements": [{"alias": "A", "target": {"union": "string"}}]},
			{"statements": [{"alias": "A", "target": {"object": [{"name": "x"}]}}]},
			{"statements": [{"interface": "I", "properties": [{"type": "string"}]}]},
			{"statements": [{"interface": "I", "comment": ["no"]}]},
			{"statements": [{"alias": "A", "target": "string", "export": "false"}]},
		]:
			with self.subTest(bogon):
				self.assertTrue(_bad(bogon).sick())

	def test_too_many_issues(self):
		document = {"statements": [{"alias": "T%d" % i, "target": "Nope"} for i in range(5)]}
		with self.assertRaises(TooManyIssues):
			load_program(document, Report(verbose=0, max_issues=3))

if __name__ == '__main__':
	unittest.main()
