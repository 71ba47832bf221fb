from jvmsig.arglist import arglist_from_jvm, arglist_to_jvm, split_jvm_arglist
from jvmsig.class_get_name import (
    binary_name_to_class_get_name,
    field_descriptor_to_class_get_name,
)
from jvmsig.errors import (
    ErrorKind,
    MalformedArgList,
    MalformedDescriptor,
    NotAPrimitiveType,
    SignatureError,
)
from jvmsig.primitives import (
    PRIMITIVE_CODES,
    PRIMITIVE_NAMES,
    code_to_primitive,
    primitive_code,
    primitive_name,
    primitive_to_code,
)
from jvmsig.scalar import (
    binary_name_to_field_descriptor,
    field_descriptor_to_binary_name,
    parse_binary_name,
    parse_field_descriptor,
    primitive_type_name_to_field_descriptor,
)
from jvmsig.types_ import (
    BinaryName,
    ClassGetName,
    FieldDescriptor,
    TypeName,
    is_binary_name,
    is_class_get_name,
    is_field_descriptor,
)

__all__ = [
    "BinaryName",
    "ClassGetName",
    "ErrorKind",
    "FieldDescriptor",
    "MalformedArgList",
    "MalformedDescriptor",
    "NotAPrimitiveType",
    "PRIMITIVE_CODES",
    "PRIMITIVE_NAMES",
    "SignatureError",
    "TypeName",
    "arglist_from_jvm",
    "arglist_to_jvm",
    "binary_name_to_class_get_name",
    "binary_name_to_field_descriptor",
    "code_to_primitive",
    "field_descriptor_to_binary_name",
    "field_descriptor_to_class_get_name",
    "is_binary_name",
    "is_class_get_name",
    "is_field_descriptor",
    "parse_binary_name",
    "parse_field_descriptor",
    "primitive_code",
    "primitive_name",
    "primitive_to_code",
    "primitive_type_name_to_field_descriptor",
    "split_jvm_arglist",
]
