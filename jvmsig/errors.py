import enum
import typing as t


@enum.unique
class ErrorKind(enum.Enum):
    not_a_primitive_type = "not-a-primitive-type"
    malformed_descriptor = "malformed-descriptor"
    malformed_arglist = "malformed-arglist"

    def __str__(self):
        return self.value


class SignatureError(Exception):
    kind: t.ClassVar[ErrorKind]

    def __init__(self, text: str, message: str, position: t.Optional[int] = None):
        self.text = text
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"{message}: {text!r}{where}")


class NotAPrimitiveType(SignatureError):
    kind = ErrorKind.not_a_primitive_type


class MalformedDescriptor(SignatureError):
    kind = ErrorKind.malformed_descriptor


class MalformedArgList(SignatureError):
    kind = ErrorKind.malformed_arglist
