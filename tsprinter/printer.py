"""
Render the model as TypeScript text.

This is a straight tree-walk. The only cleverness is in three places:

1. Unions and intersections parenthesize each other, since "|" and "&"
   have different precedence.
2. An intersection of object shapes prints as one merged object literal.
   (See the algebra module.)
3. A named declaration in value position prints as just its name.
   Only the declaration as a statement shows its body.

Indentation is a count of spaces. Object bodies indent their properties
two spaces deeper than the construct that holds them.
"""
from boozetools.support.foundation import Visitor
from .ontology import NamedDeclaration, TypeExpression
from . import syntax
from .algebra import optimize_intersection

class Printer(Visitor):

	def reference(self, value:TypeExpression, indentation:int) -> str:
		""" Print something in value position. """
		if isinstance(value, NamedDeclaration): return value.name
		else: return self.visit(value, indentation)

	def _wrapped(self, member, indentation:int, cls) -> str:
		text = self.reference(member, indentation)
		return "( %s )" % text if isinstance(member, cls) else text

	@staticmethod
	def _head(dfn:NamedDeclaration, indentation:int, keyword:str) -> str:
		indent = " " * indentation
		export = "export " if dfn.export else ""
		return "%s%s%s%s %s" % (dfn.print_comment(indentation), indent, export, keyword, dfn.name)

	@staticmethod
	def visit_Primitive(p:syntax.Primitive, _indentation:int): return p.keyword

	@staticmethod
	def visit_StringLiteral(s:syntax.StringLiteral, _indentation:int): return "'%s'" % s.literal

	def visit_ObjectProperty(self, prop:syntax.ObjectProperty, indentation:int):
		indent = " " * indentation
		value = self.reference(prop.value, indentation)
		return "%s%s%s: %s" % (prop.print_comment(indentation), indent, prop.name, value)

	def visit_ObjectType(self, obj:syntax.ObjectType, indentation:int):
		body = ",\n".join(self.visit(p, indentation + 2) for p in obj.properties)
		return "{\n%s\n%s}" % (body, " " * indentation)

	def visit_Union(self, union:syntax.Union, indentation:int):
		return " | ".join(self._wrapped(m, indentation, syntax.Intersection) for m in union.members)

	def visit_Intersection(self, ix:syntax.Intersection, indentation:int):
		# No members prints nothing; the merge would otherwise make an empty object.
		if not ix.members: return ""
		merged = optimize_intersection(ix)
		if merged is not None: return self.visit(merged, indentation)
		return " & ".join(self._wrapped(m, indentation, syntax.Union) for m in ix.members)

	def visit_EnumDecl(self, dfn:syntax.EnumDecl, indentation:int):
		indent = " " * (indentation + 2)
		entries = ",\n".join(
			"%s%s = %s" % (indent, e.name, e.value) if e.value else indent + e.name
			for e in dfn.entries
		)
		return "%s {\n%s\n%s}" % (self._head(dfn, indentation, "enum"), entries, " " * indentation)

	def visit_TypeAliasDecl(self, dfn:syntax.TypeAliasDecl, indentation:int):
		return "%s = %s" % (self._head(dfn, indentation, "type"), self.reference(dfn.target, indentation))

	def visit_InterfaceDecl(self, dfn:syntax.InterfaceDecl, indentation:int):
		head = self._head(dfn, indentation, "interface")
		if dfn.extends:
			head += " extends " + ", ".join(x.name for x in dfn.extends)
		return "%s %s" % (head, self.visit(dfn.definition, indentation))

	def visit_Program(self, program:syntax.Program, indentation:int):
		return "\n\n".join(self.visit(s, indentation) for s in program.statements)

PRINTER = Printer()

def render(node, indentation:int=0) -> str:
	return PRINTER.visit(node, indentation)
