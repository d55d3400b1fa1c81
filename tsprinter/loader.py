"""
Build a Program from a plain-data description, such as one might decode from JSON.

The description looks like:

	{"statements": [
		{"enum": "Color", "entries": ["Red", {"name": "Green", "value": "'green'"}]},
		{"interface": "Shape", "export": true, "properties": [
			{"name": "color", "type": "Color", "comment": "What color to paint it"}
		]},
		{"interface": "Square", "extends": ["Shape"], "properties": [{"name": "side", "type": "number"}]},
		{"alias": "Pick", "target": {"union": ["Square", {"literal": "none"}]}}
	]}

A type is written as a primitive keyword, the name of some statement in the same
description, or a single-key object: literal, ref, object, union, or intersection.

Loading happens in two passes, so that statements may refer to each other in any order:
The first pass makes an empty declaration for each statement and notes its name.
The second pass fills in the bodies, resolving names as it goes.
"""
from typing import Any
from .diagnostics import Report
from .ontology import NamedDeclaration, TypeExpression
from . import syntax, primitive

class LoadError(Exception):
	""" Raised after a pass that found something wrong. The report has the details. """

STATEMENT_KINDS = ("enum", "alias", "interface")

def load_program(document:Any, report:Report) -> syntax.Program:
	program = Loader(report).load(document)
	if report.sick():
		raise LoadError("load")
	return program

class Loader:
	_defined: dict[str, tuple[NamedDeclaration, str]]

	def __init__(self, report:Report):
		self._report = report
		self._defined = {}

	def load(self, document) -> syntax.Program:
		program = syntax.Program()
		if not isinstance(document, dict):
			self._report.malformed("", "an object with a 'statements' list", document)
			return program
		statements = document.get("statements", [])
		if not isinstance(statements, list):
			self._report.malformed("statements", "a list", statements)
			return program
		pending = []
		for i, item in enumerate(statements):
			path = "statements[%d]" % i
			dfn = self.declare(path, item)
			if dfn is not None:
				pending.append((path, item, dfn))
				program.add_statement(dfn)
		self._report.info("Declared %d statement(s)." % len(pending))
		for path, item, dfn in pending:
			self.define(path, item, dfn)
		return program

	# First pass

	def declare(self, path:str, item) -> NamedDeclaration:
		if not isinstance(item, dict):
			self._report.malformed(path, "an object", item)
			return None
		kinds = [k for k in STATEMENT_KINDS if k in item]
		if len(kinds) != 1:
			self._report.unknown_form(path, item.keys())
			return None
		kind = kinds[0]
		name = item[kind]
		if not isinstance(name, str):
			self._report.malformed(path + "." + kind, "a name", name)
			return None
		export = item.get("export", False)
		if not isinstance(export, bool):
			self._report.malformed(path + ".export", "true or false", export)
			export = False
		if kind == "enum": dfn = syntax.EnumDecl(name, export=export)
		elif kind == "alias": dfn = syntax.TypeAliasDecl(name, primitive.NEVER, export=export)
		else: dfn = syntax.InterfaceDecl(name, export=export)
		if name in self._defined:
			self._report.redefined(path, name, self._defined[name][1])
		else:
			self._defined[name] = dfn, path
		self._comment(path, item, dfn)
		return dfn

	# Second pass

	def define(self, path:str, item:dict, dfn:NamedDeclaration):
		if isinstance(dfn, syntax.EnumDecl):
			for i, entry in enumerate(self._list(path + ".entries", item.get("entries", []))):
				self._entry("%s.entries[%d]" % (path, i), entry, dfn)
		elif isinstance(dfn, syntax.TypeAliasDecl):
			if "target" in item:
				dfn.target = self.type_expression(path + ".target", item["target"])
			else:
				self._report.issue(path, "A type alias needs a target.")
		else:
			for i, name in enumerate(self._list(path + ".extends", item.get("extends", []))):
				self._extend("%s.extends[%d]" % (path, i), name, dfn)
			for p in self._properties(path + ".properties", item.get("properties", [])):
				dfn.definition.add_property(p)

	def _entry(self, path:str, entry, dfn:syntax.EnumDecl):
		if isinstance(entry, str):
			dfn.add_entry(entry)
		elif isinstance(entry, dict) and isinstance(entry.get("name"), str):
			value = entry.get("value")
			if value is None or isinstance(value, str):
				dfn.add_entry(entry["name"], value)
			else:
				self._report.malformed(path + ".value", "a string", value)
		else:
			self._report.malformed(path, "a name or an object with a 'name'", entry)

	def _extend(self, path:str, name, dfn:syntax.InterfaceDecl):
		target = self.lookup(path, name)
		if target is None: return
		if isinstance(target, syntax.InterfaceDecl):
			dfn.add_extend(target)
		else:
			self._report.not_an_interface(path, name)

	def _properties(self, path:str, items) -> list[syntax.ObjectProperty]:
		properties = []
		for i, item in enumerate(self._list(path, items)):
			where = "%s[%d]" % (path, i)
			if not (isinstance(item, dict) and isinstance(item.get("name"), str)):
				self._report.malformed(where, "an object with a 'name'", item)
				continue
			if "type" not in item:
				self._report.issue(where, "A property needs a type.")
				continue
			prop = syntax.ObjectProperty(item["name"], self.type_expression(where + ".type", item["type"]))
			self._comment(where, item, prop)
			properties.append(prop)
		return properties

	def type_expression(self, path:str, spec) -> TypeExpression:
		if isinstance(spec, str):
			if spec in primitive.BY_KEYWORD: return primitive.BY_KEYWORD[spec]
			return self.lookup(path, spec) or primitive.NEVER
		if not isinstance(spec, dict) or len(spec) != 1:
			self._report.malformed(path, "a type", spec)
			return primitive.NEVER
		(form, body), = spec.items()
		where = path + "." + str(form)
		if form == "literal":
			if isinstance(body, str): return syntax.StringLiteral(body)
			self._report.malformed(where, "a string", body)
		elif form == "ref":
			if isinstance(body, str): return self.lookup(where, body) or primitive.NEVER
			self._report.malformed(where, "a name", body)
		elif form == "object":
			return syntax.ObjectType(self._properties(where, body))
		elif form in ("union", "intersection"):
			members = [self.type_expression("%s[%d]" % (where, i), m) for i, m in enumerate(self._list(where, body))]
			return syntax.Union(members) if form == "union" else syntax.Intersection(members)
		else:
			self._report.unknown_form(path, spec.keys())
		return primitive.NEVER

	def lookup(self, path:str, name) -> NamedDeclaration:
		if not isinstance(name, str):
			self._report.malformed(path, "a name", name)
		elif name in self._defined:
			return self._defined[name][0]
		else:
			self._report.undefined_name(path, name)

	# Odds and ends

	def _list(self, path:str, items) -> list:
		if isinstance(items, list): return items
		self._report.malformed(path, "a list", items)
		return []

	def _comment(self, path:str, item:dict, node):
		comment = item.get("comment")
		if comment is None: return
		if isinstance(comment, str): node.with_comment(comment)
		else: self._report.malformed(path + ".comment", "a string", comment)
