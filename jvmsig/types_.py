import typing as t
from dataclasses import dataclass

from typing_extensions import TypeGuard

from jvmsig.primitives import PRIMITIVE_CODES, PRIMITIVE_NAMES, primitive_to_code

BinaryName = t.NewType("BinaryName", str)
FieldDescriptor = t.NewType("FieldDescriptor", str)
ClassGetName = t.NewType("ClassGetName", str)


@dataclass(frozen=True)
class TypeName:
    """A single type with the array dimensions split off.

    ``base`` is either a primitive keyword or a dot-separated class name,
    whichever notation it was parsed from.
    """

    base: str
    dimensions: int = 0
    is_primitive: bool = False

    @property
    def is_array(self) -> bool:
        return self.dimensions > 0

    def element_type(self) -> "TypeName":
        if not self.is_array:
            raise ValueError(f"{self.base} is not an array type")
        return TypeName(self.base, self.dimensions - 1, self.is_primitive)

    def to_binary_name(self) -> BinaryName:
        return BinaryName(self.base + "[]" * self.dimensions)

    def to_field_descriptor(self) -> FieldDescriptor:
        if self.is_primitive:
            element = primitive_to_code(self.base)
        else:
            element = "L" + self.base.replace(".", "/") + ";"
        return FieldDescriptor("[" * self.dimensions + element)


def _is_class_path(s: str, sep: str) -> bool:
    if not s or "[" in s or ";" in s or any(c.isspace() for c in s):
        return False
    return all(s.split(sep))


def is_binary_name(s: str) -> TypeGuard[BinaryName]:
    while s.endswith("[]"):
        s = s[:-2]
    return s in PRIMITIVE_NAMES or ("/" not in s and _is_class_path(s, "."))


def is_field_descriptor(s: str) -> TypeGuard[FieldDescriptor]:
    s = s.lstrip("[")
    if s in PRIMITIVE_CODES:
        return True
    return (
        len(s) > 2
        and s[0] == "L"
        and s[-1] == ";"
        and "." not in s
        and _is_class_path(s[1:-1], "/")
    )


def is_class_get_name(s: str) -> TypeGuard[ClassGetName]:
    if s.startswith("["):
        return "/" not in s and is_field_descriptor(s.replace(".", "/"))
    return not s.endswith("[]") and is_binary_name(s)
