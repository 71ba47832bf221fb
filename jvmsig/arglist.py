"""Conversion of method argument lists.

Java form lists binary names separated by commas, ``(int, java.lang.String[])``.
JVM form concatenates field descriptors with no separator, ``(I[Ljava/lang/String;)``,
relying on each descriptor being self-delimiting.
"""

import typing as t

from jvmsig.errors import MalformedArgList
from jvmsig.primitives import primitive_name
from jvmsig.scalar import (
    binary_name_to_field_descriptor,
    field_descriptor_to_binary_name,
)
from jvmsig.types_ import FieldDescriptor


def _check_parens(arglist: str) -> None:
    if not (arglist.startswith("(") and arglist.endswith(")")):
        raise MalformedArgList(
            arglist, "Argument list must be enclosed in parentheses"
        )


class _DescriptorScanner:
    """Cursor over the interior of a JVM-form argument list."""

    __slots__ = ("text", "pos", "end")

    text: str
    pos: int
    end: int

    def __init__(self, arglist: str) -> None:
        _check_parens(arglist)
        self.text = arglist
        self.pos = 1
        self.end = len(arglist) - 1

    def __iter__(self) -> t.Iterator[str]:
        while not self.at_end():
            yield self.next_span()

    def at_end(self) -> bool:
        return self.pos >= self.end

    def next_span(self) -> str:
        start = self.pos
        i = self._skip_array_markers(start)
        if self.text[i] == "L":
            stop = self._match_class(i)
        else:
            stop = self._match_primitive(i)
        self.pos = stop
        return self.text[start:stop]

    def _skip_array_markers(self, i: int) -> int:
        start = i
        while self.text[i] == "[":
            i += 1
            if i >= self.end:
                raise MalformedArgList(
                    self.text, "Array marker without an element type", start
                )
        return i

    def _match_class(self, i: int) -> int:
        semicolon = self.text.find(";", i, self.end)
        if semicolon == -1:
            raise MalformedArgList(self.text, "Unterminated class descriptor", i)
        return semicolon + 1

    def _match_primitive(self, i: int) -> int:
        if primitive_name(self.text[i]).is_none():
            raise MalformedArgList(
                self.text, f"Unknown primitive type code {self.text[i]!r}", i
            )
        return i + 1


def split_jvm_arglist(arglist: str) -> t.List[FieldDescriptor]:
    """Split ``(D1D2...)`` into its individual field descriptors."""
    return [FieldDescriptor(span) for span in _DescriptorScanner(arglist)]


def arglist_to_jvm(arglist: str) -> str:
    """Convert e.g. ``(java.lang.Integer[], int)`` to ``([Ljava/lang/Integer;I)``."""
    _check_parens(arglist)
    result = "("
    for token in arglist[1:-1].split(","):
        # Adjacent commas produce no argument; blank ones still convert.
        if token:
            result += binary_name_to_field_descriptor(token.strip())
    return result + ")"


def arglist_from_jvm(arglist: str) -> str:
    """Convert e.g. ``([Ljava/lang/Integer;I)`` to ``(java.lang.Integer[], int)``."""
    args = [field_descriptor_to_binary_name(d) for d in split_jvm_arglist(arglist)]
    return "(" + ", ".join(args) + ")"
