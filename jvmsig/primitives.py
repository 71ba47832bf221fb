import types
import typing as t

from patina import Option, Some, None_

from jvmsig.errors import MalformedDescriptor, NotAPrimitiveType

_primitive_to_code: t.Final = types.MappingProxyType(
    {
        "boolean": "Z",
        "byte": "B",
        "char": "C",
        "double": "D",
        "float": "F",
        "int": "I",
        "long": "J",
        "short": "S",
    }
)

_code_to_primitive: t.Final = types.MappingProxyType(
    {code: name for name, code in _primitive_to_code.items()}
)

PRIMITIVE_NAMES: t.Final = frozenset(_primitive_to_code)
PRIMITIVE_CODES: t.Final = frozenset(_code_to_primitive)


def primitive_code(name: str) -> Option[str]:
    if name in _primitive_to_code:
        return Some(_primitive_to_code[name])
    return None_()


def primitive_name(code: str) -> Option[str]:
    if code in _code_to_primitive:
        return Some(_code_to_primitive[code])
    return None_()


def primitive_to_code(name: str) -> str:
    """Strict lookup of the descriptor code for a primitive keyword."""
    code = primitive_code(name)
    if code.is_none():
        raise NotAPrimitiveType(name, "Not the name of a primitive type")
    return code.unwrap()


def code_to_primitive(code: str) -> str:
    """Strict lookup of the primitive keyword for a descriptor code."""
    name = primitive_name(code)
    if name.is_none():
        raise MalformedDescriptor(code, "Not a primitive type code")
    return name.unwrap()
