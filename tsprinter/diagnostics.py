"""
Problems found while loading a description, and how to complain about them.

The model itself never complains. Only the loader, which turns plain data
into a model, has anything to say, and it says it here.
"""
import sys
from typing import NamedTuple

class TooManyIssues(Exception):
	pass

class Issue(NamedTuple):
	path: str  # Where in the description; e.g. "statements[2].target.union[1]"
	message: str
	def __str__(self): return "%s: %s" % (self.path or "(document)", self.message)

class Report:
	_issues : list[Issue]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self) -> list[Issue]: return self._issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, path:str, message:str):
		self._issues.append(Issue(path, message))
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		for each in self._issues:
			print(each, file=sys.stderr)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)

	# Methods the loader calls:

	def malformed(self, path:str, expected:str, found):
		self.issue(path, "Expected %s; found %s." % (expected, type(found).__name__))

	def unknown_form(self, path:str, keys):
		self.issue(path, "I don't know what to make of a form with keys %s." % ", ".join(sorted(map(str, keys))))

	def redefined(self, path:str, name:str, first:str):
		self.issue(path, "'%s' is already defined at %s." % (name, first))

	def undefined_name(self, path:str, name:str):
		self.issue(path, "I don't see what '%s' refers to." % name)

	def not_an_interface(self, path:str, name:str):
		self.issue(path, "Only interfaces can be extended, but '%s' is not one." % name)

	def cannot_read(self, path:str, why):
		self.issue(path, "Something went pear-shaped while trying to read this: %s" % why)
