"""
Print TypeScript declarations from a JSON description.

{0}

For example:

    tsprinter shapes.json

prints the declarations described in shapes.json, or else tries to explain why not.

    tsprinter shapes.json -o shapes.d.ts

writes them to shapes.d.ts instead.

    tsprinter -h

will explain all the arguments.
"""
import sys, json, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="tsprinter",
	description="Print TypeScript declarations from a JSON description.",
)
parser.add_argument("description", help="a JSON file with a list of statements.")
parser.add_argument('-o', "--output", help="write here instead of to standard output.")
parser.add_argument('-i', "--indent", type=int, default=0, help="indent every statement by this many spaces.")
parser.add_argument('-s', "--semicolons", action="store_true", help="end each type alias with a semicolon.")
parser.add_argument('-v', "--verbose", action="count", help="say what is going on, on standard error.")

def render_program(program, indentation:int=0, semicolons:bool=False) -> str:
	""" The text of a whole file: statements, optional semicolons, and a final newline. """
	from .syntax import TypeAliasDecl
	if not semicolons:
		return program.print(indentation) + "\n"
	chunks = []
	for statement in program.statements:
		text = statement.print(indentation)
		chunks.append(text + ";" if isinstance(statement, TypeAliasDecl) else text)
	return "\n\n".join(chunks) + "\n"

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .loader import load_program, LoadError
	report = Report(verbose=args.verbose)
	path = Path.cwd() / args.description
	try:
		try:
			document = json.loads(path.read_text(encoding="utf-8"))
		except (OSError, ValueError) as ex:
			report.cannot_read(str(path), ex)
			report.complain_to_console()
			return 1
		report.info("Read", path)
		try: program = load_program(document, report)
		except LoadError:
			report.complain_to_console()
			return 1
	except TooManyIssues:
		report.complain_to_console()
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	text = render_program(program, args.indent, args.semicolons)
	if args.output:
		Path(args.output).write_text(text, encoding="utf-8")
		report.info("Wrote %d statement(s) to" % len(program.statements), args.output)
	else:
		sys.stdout.write(text)
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
