"""
The intersection-merging pass.

An intersection of object shapes means an object which has every property
of every shape. So instead of printing  { a: string } & { b: number }
we can print the single object literal  { a: string, b: number }.

Where two shapes both mention the same property, the value must satisfy
both constraints at once, so the merged property gets the intersection
of the two values. That new intersection gets the same treatment when its
turn comes to print.

Everything here is a pure function of the tree as it stands.
The nodes built here are fresh, and never get attached to the input.
"""
from typing import Iterable, Optional
from .ontology import TypeExpression
from .syntax import ObjectType, ObjectProperty, Intersection

def flatten(expression:TypeExpression) -> Optional[list[ObjectProperty]]:
	"""
	Reduce an object shape, or an intersection of them, to one list of properties.
	Anything else fails the whole reduction, which is signaled by returning None.
	"""
	if isinstance(expression, ObjectType):
		return list(expression.properties)
	if isinstance(expression, Intersection):
		properties = []
		for member in expression.members:
			more = flatten(member)
			if more is None: return None
			properties.extend(more)
		return properties
	return None

def merge_properties(properties:Iterable[ObjectProperty]) -> ObjectType:
	""" Group properties by name, first-seen order, intersecting the values of duplicates. """
	grouped: dict[str, list[ObjectProperty]] = {}
	for prop in properties:
		grouped.setdefault(prop.name, []).append(prop)
	merged = ObjectType()
	for name, props in grouped.items():
		if len(props) == 1:
			merged.add_property(props[0])
		else:
			combined = ObjectProperty(name, Intersection(p.value for p in props))
			comments = []
			for p in props:
				if p.comment and p.comment not in comments:
					comments.append(p.comment)
			if comments: combined.with_comment("\n".join(comments))
			merged.add_property(combined)
	return merged

def optimize_intersection(intersection:Intersection) -> Optional[ObjectType]:
	""" The single object literal equivalent to this intersection, or None if there is none. """
	properties = flatten(intersection)
	if properties is None: return None
	return merge_properties(properties)
