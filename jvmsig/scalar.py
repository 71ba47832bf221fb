"""Conversion of a single type between binary names and field descriptors.

The two directions are not mirror images: binary names mark arrays with
trailing ``[]`` pairs while field descriptors use leading ``[`` characters,
so each side counts its own markers before the base type is looked up.
"""

from jvmsig.diagnostics import Diagnostic
from jvmsig.errors import MalformedDescriptor
from jvmsig.primitives import primitive_code, primitive_name, primitive_to_code
from jvmsig.types_ import BinaryName, FieldDescriptor, TypeName

_suspicious_chars = "/;"


def parse_binary_name(name: str) -> TypeName:
    dimensions = 0
    base = name
    while base.endswith("[]"):
        dimensions += 1
        base = base[:-2]

    if primitive_code(base).is_some():
        return TypeName(base, dimensions, is_primitive=True)

    # Anything else is taken to be a class name; binary names have no
    # enumerable validity check.
    if not base:
        Diagnostic.empty_binary_name(subject=name)
    for c in base:
        if c in _suspicious_chars or c.isspace():
            Diagnostic.suspicious_binary_name(c, subject=name)
            break
    return TypeName(base, dimensions)


def parse_field_descriptor(descriptor: str) -> TypeName:
    if not descriptor:
        raise MalformedDescriptor(descriptor, "Empty field descriptor")

    dimensions = 0
    rest = descriptor
    while rest.startswith("["):
        dimensions += 1
        rest = rest[1:]
    if not rest:
        raise MalformedDescriptor(
            descriptor, "Missing element type after array markers", dimensions
        )

    if rest.startswith("L") and rest.endswith(";"):
        return TypeName(rest[1:-1].replace("/", "."), dimensions)

    # "V" is deliberately absent from the primitive table.
    name = primitive_name(rest)
    if name.is_none():
        raise MalformedDescriptor(descriptor, "Malformed base type", dimensions)
    return TypeName(name.unwrap(), dimensions, is_primitive=True)


def binary_name_to_field_descriptor(name: str) -> FieldDescriptor:
    """Convert e.g. ``java.lang.Object[]`` to ``[Ljava/lang/Object;``.

    Never raises: a name that is not a primitive keyword is converted as a
    class name.
    """
    return parse_binary_name(name).to_field_descriptor()


def primitive_type_name_to_field_descriptor(name: str) -> FieldDescriptor:
    """Convert a primitive keyword such as ``int`` to its code ``I``.

    Raises :class:`~jvmsig.errors.NotAPrimitiveType` for anything else,
    including arrays of primitives.
    """
    return FieldDescriptor(primitive_to_code(name))


def field_descriptor_to_binary_name(descriptor: str) -> BinaryName:
    """Convert e.g. ``[Ljava/lang/Object;`` to ``java.lang.Object[]``.

    Raises :class:`~jvmsig.errors.MalformedDescriptor` if ``descriptor`` is
    empty, has nothing after its array markers, or its element type is
    neither ``L...;`` nor a primitive code.
    """
    return parse_field_descriptor(descriptor).to_binary_name()
