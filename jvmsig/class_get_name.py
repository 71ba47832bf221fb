"""Bridge to the notation returned by ``Class.getName()``.

That notation matches binary names except for arrays, which are written as
field descriptors with ``.`` separators, e.g. ``[Ljava.lang.String;``.
"""

from jvmsig.scalar import (
    binary_name_to_field_descriptor,
    field_descriptor_to_binary_name,
)
from jvmsig.types_ import ClassGetName


def binary_name_to_class_get_name(name: str) -> ClassGetName:
    if name.endswith("[]"):
        return ClassGetName(binary_name_to_field_descriptor(name).replace("/", "."))
    return ClassGetName(name)


def field_descriptor_to_class_get_name(descriptor: str) -> ClassGetName:
    if descriptor.startswith("["):
        return ClassGetName(descriptor.replace("/", "."))
    return ClassGetName(field_descriptor_to_binary_name(descriptor))
