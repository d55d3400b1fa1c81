"""
Pre-built instances of every primitive keyword.
Primitives never change once made, so these may be shared freely.
"""
from typing import get_args
from .syntax import Primitive, Keyword

KEYWORDS: tuple[str, ...] = get_args(Keyword)
BY_KEYWORD: dict[str, Primitive] = {}

def _built_in(keyword:str) -> Primitive:
	BY_KEYWORD[keyword] = Primitive(keyword)
	return BY_KEYWORD[keyword]

STRING = _built_in("string")
NUMBER = _built_in("number")
BOOLEAN = _built_in("boolean")
ANY = _built_in("any")
NULL = _built_in("null")
UNDEFINED = _built_in("undefined")
VOID = _built_in("void")
NEVER = _built_in("never")
UNKNOWN = _built_in("unknown")
OBJECT = _built_in("object")
SYMBOL = _built_in("symbol")
BIGINT = _built_in("bigint")
THIS = _built_in("this")
FUNCTION = _built_in("function")
TRUE = _built_in("true")
FALSE = _built_in("false")
