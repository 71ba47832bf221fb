"""Tests for the command line entry point."""

import io

from jvmsig import diagnostics
from jvmsig.__main__ import main


class TestMain:
    def test_values_from_arguments(self, capsys):
        assert main(["binary-to-descriptor", "int", "java.lang.Object[]"]) == 0
        assert capsys.readouterr().out.splitlines() == ["I", "[Ljava/lang/Object;"]

    def test_values_from_stdin(self, capsys, monkeypatch):
        stdin = io.StringIO("([Ljava/lang/Integer;I)\n\n(J)\n")
        monkeypatch.setattr("sys.stdin", stdin)
        assert main(["arglist-from-jvm"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "(java.lang.Integer[], int)",
            "(long)",
        ]

    def test_failure_continues(self, capsys):
        assert main(["descriptor-to-binary", "V", "[[I"]) == 1
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["int[][]"]
        assert captured.err.startswith("error(malformed-descriptor):")

    def test_primitive_failure_kind(self, capsys):
        assert main(["primitive-to-descriptor", "notatype"]) == 1
        assert "error(not-a-primitive-type)" in capsys.readouterr().err

    def test_warnings_on_by_default(self, capsys):
        assert main(["binary-to-descriptor", "a/b"]) == 0
        assert "WARN(suspicious-binary-name)" in capsys.readouterr().err
        assert diagnostics.enabled_diagnostics == diagnostics.default_diagnostics

    def test_no_warnings(self, capsys):
        assert main(["--no-warnings", "binary-to-descriptor", "a/b"]) == 0
        assert capsys.readouterr().err == ""
        assert not diagnostics.enabled_diagnostics

    def test_warning_flag(self, capsys):
        argv = ["-W", "no-suspicious-binary-name", "binary-to-class-get-name", "a/b[]"]
        assert main(argv) == 0
        captured = capsys.readouterr()
        assert captured.out.strip() == "[La.b;"
        assert captured.err == ""
