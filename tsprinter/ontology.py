"""
The most-fundamental classes of the node hierarchy live here,
apart from the concrete nodes, so that the printer and the
merge pass can talk about *kinds* of node without circular imports.

Every node knows how to print itself, but the actual rendering
lives in the printer module: a node's print method just hands
itself to the printer.
"""

class Printable:
	def print(self, indentation:int=0) -> str:
		""" Render this node as TypeScript text, indented by so many spaces. """
		from .printer import render
		return render(self, indentation)

class TypeExpression(Printable):
	""" Anything that can stand where TypeScript expects a type. """

class Commentable:
	""" Mix-in for nodes that may carry a doc-comment just before their first line. """
	comment: str = None
	
	def with_comment(self, comment:str):
		self.comment = comment
		return self
	
	def print_comment(self, indentation:int=0) -> str:
		if not self.comment: return ""
		indent = " " * indentation
		lines = self.comment.split("\n")
		if len(lines) == 1:
			return "%s/** %s */\n" % (indent, self.comment)
		body = "\n".join("%s * %s" % (indent, line) for line in lines)
		return "%s/**\n%s\n%s */\n" % (indent, body, indent)

class NamedDeclaration(TypeExpression, Commentable):
	"""
	A top-level statement which exposes a name.
	Wherever one of these gets used as a value, only the name is printed.
	"""
	name: str
	export: bool
	
	def __init__(self, name:str, export:bool=False):
		self.name = name
		self.export = export
	
	def __repr__(self): return "<%s %s>" % (type(self).__name__, self.name)
