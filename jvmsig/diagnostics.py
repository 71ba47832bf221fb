import enum
import sys
import typing as t


class Diagnostic(enum.Enum):
    empty_binary_name = "empty-binary-name"
    suspicious_binary_name = "suspicious-binary-name"

    @property
    def message(self) -> str:
        return _diagnostic_messages[self]

    def __call__(self, *args, subject: str, **kwargs) -> None:
        warn(self, *args, subject=subject, **kwargs)


def warn(type: Diagnostic, *args, subject: str, **kwargs) -> None:
    if type not in enabled_diagnostics:
        return

    diagnostic_message = type.message % (args or kwargs)
    print(
        f"WARN({type.value}): {diagnostic_message} in {subject!r}",
        file=sys.stderr,
    )


def enable(*names: str) -> None:
    enabled_diagnostics.update(Diagnostic(name) for name in names)


def disable(*names: str) -> None:
    enabled_diagnostics.difference_update(Diagnostic(name) for name in names)


# Library calls stay silent; the command line turns these on.
default_diagnostics: t.FrozenSet[Diagnostic] = frozenset(Diagnostic)

enabled_diagnostics: t.Set[Diagnostic] = set()


_diagnostic_messages = {
    Diagnostic.empty_binary_name: (
        "Binary name has no base type; converting it as an empty class name"
    ),
    Diagnostic.suspicious_binary_name: (
        "Binary name contains %r; converting it as a class name anyway"
    ),
}
