"""
The node classes of the type-expression model.

Callers build a tree bottom-up through these constructors and the fluent
add_* methods, each of which mutates in place and returns the owner.
Constructors copy the sequences they are given, so each node owns its lists.
Nothing here checks anything: duplicate names, empty unions, and so forth
all pass straight through to the printer.
"""
from typing import Iterable, Literal, NamedTuple, Optional
from .ontology import Printable, TypeExpression, Commentable, NamedDeclaration

Keyword = Literal[
	"string", "number", "boolean", "any", "null", "undefined", "void", "never",
	"unknown", "object", "symbol", "bigint", "this", "function", "true", "false",
]

class Primitive(TypeExpression):
	__slots__ = ("_keyword",)
	def __init__(self, keyword:Keyword):
		self._keyword = keyword
	@property
	def keyword(self) -> Keyword: return self._keyword
	def __repr__(self): return "<Primitive %s>" % self._keyword

class StringLiteral(TypeExpression):
	""" Printed in single quotes, exactly as given. Nothing gets escaped. """
	def __init__(self, literal:str):
		self.literal = literal
	def __repr__(self): return "<StringLiteral %r>" % self.literal

class ObjectProperty(Printable, Commentable):
	def __init__(self, name:str, value:TypeExpression):
		self.name = name
		self.value = value
	def __repr__(self): return "<ObjectProperty %s>" % self.name

class ObjectType(TypeExpression):
	properties: list[ObjectProperty]
	def __init__(self, properties:Iterable[ObjectProperty]=()):
		self.properties = list(properties)
	def add_property(self, prop:ObjectProperty) -> "ObjectType":
		self.properties.append(prop)
		return self

class _Composite(TypeExpression):
	members: list[TypeExpression]
	def __init__(self, members:Iterable[TypeExpression]=()):
		self.members = list(members)
	def add_member(self, member:TypeExpression):
		self.members.append(member)
		return self
	def __repr__(self): return "<%s of %d>" % (type(self).__name__, len(self.members))

class Union(_Composite):
	""" Members join with "|". """

class Intersection(_Composite):
	""" Members join with "&", unless they all boil down to object shapes. """

class EnumEntry(NamedTuple):
	name: str
	value: Optional[str] = None

class EnumDecl(NamedDeclaration):
	entries: list[EnumEntry]
	def __init__(self, name:str, entries:Iterable[EnumEntry]=(), export:bool=False):
		super().__init__(name, export)
		self.entries = list(entries)
	def add_entry(self, entry, value:Optional[str]=None) -> "EnumDecl":
		""" Takes either an EnumEntry or else the name (and maybe value) of one. """
		if not isinstance(entry, EnumEntry):
			entry = EnumEntry(entry, value)
		self.entries.append(entry)
		return self

class TypeAliasDecl(NamedDeclaration):
	def __init__(self, name:str, target:TypeExpression, export:bool=False):
		super().__init__(name, export)
		self.target = target

class InterfaceDecl(NamedDeclaration):
	extends: list["InterfaceDecl"]
	definition: ObjectType
	def __init__(self, name:str, extends:Iterable["InterfaceDecl"]=(), definition:ObjectType=None, export:bool=False):
		super().__init__(name, export)
		self.extends = list(extends)
		self.definition = ObjectType() if definition is None else definition
	def add_extend(self, extend:"InterfaceDecl") -> "InterfaceDecl":
		self.extends.append(extend)
		return self

Statement = EnumDecl | TypeAliasDecl | InterfaceDecl

class Program(Printable):
	""" The statements of one would-be declaration file, in order. """
	statements: list[Statement]
	def __init__(self, statements:Iterable[Statement]=()):
		self.statements = list(statements)
	def add_statement(self, statement:Statement) -> "Program":
		self.statements.append(statement)
		return self
