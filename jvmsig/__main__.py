import sys
import typing as t
from argparse import ArgumentParser

from jvmsig import diagnostics
from jvmsig.arglist import arglist_from_jvm, arglist_to_jvm
from jvmsig.class_get_name import (
    binary_name_to_class_get_name,
    field_descriptor_to_class_get_name,
)
from jvmsig.errors import SignatureError
from jvmsig.scalar import (
    binary_name_to_field_descriptor,
    field_descriptor_to_binary_name,
    primitive_type_name_to_field_descriptor,
)

_operations: t.Final[t.Mapping[str, t.Callable[[str], str]]] = {
    "binary-to-descriptor": binary_name_to_field_descriptor,
    "primitive-to-descriptor": primitive_type_name_to_field_descriptor,
    "descriptor-to-binary": field_descriptor_to_binary_name,
    "binary-to-class-get-name": binary_name_to_class_get_name,
    "descriptor-to-class-get-name": field_descriptor_to_class_get_name,
    "arglist-to-jvm": arglist_to_jvm,
    "arglist-from-jvm": arglist_from_jvm,
}

arg_parser = ArgumentParser(
    prog="jvmsig",
    description="Convert JVM type names and argument lists between notations",
)
arg_parser.add_argument(
    "OPERATION", choices=sorted(_operations), help="Conversion to apply"
)
arg_parser.add_argument(
    "VALUE",
    nargs="*",
    help="Values to convert; read one per line from stdin if omitted",
)
arg_parser.add_argument(
    "-W",
    dest="warnings",
    action="append",
    default=[],
    metavar="DIAGNOSTIC",
    help="Enable a diagnostic, or disable it with a no- prefix",
)
arg_parser.add_argument(
    "--no-warnings", action="store_true", help="Disable all diagnostics"
)


def _configure_diagnostics(warnings: t.List[str], no_warnings: bool) -> None:
    diagnostics.enabled_diagnostics.clear()
    if not no_warnings:
        diagnostics.enabled_diagnostics.update(diagnostics.default_diagnostics)
    for name in warnings:
        if name.startswith("no-"):
            diagnostics.disable(name[3:])
        else:
            diagnostics.enable(name)


def main(argv: t.Optional[t.List[str]] = None) -> int:
    args = arg_parser.parse_args(argv)
    try:
        _configure_diagnostics(args.warnings, args.no_warnings)
    except ValueError as exc:
        arg_parser.error(str(exc))

    convert = _operations[args.OPERATION]
    values = args.VALUE or (line.strip() for line in sys.stdin if line.strip())

    failed = False
    for value in values:
        try:
            print(convert(value))
        except SignatureError as exc:
            failed = True
            print(f"error({exc.kind}): {exc}", file=sys.stderr)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
