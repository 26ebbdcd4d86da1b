"""Tests for the emojiscript command line interface."""

import io
import json

import pytest
from fastapi import FastAPI

from emojiscript.cli import build_parser, main
from emojiscript.cli.errors import CLIFileNotFoundError, CLIValidationError, format_cli_error


@pytest.fixture(autouse=True)
def no_reraise(monkeypatch):
    monkeypatch.delenv("EMOJISCRIPT_RERAISE", raising=False)
    monkeypatch.delenv("EMOJISCRIPT_DEBUG", raising=False)
    monkeypatch.delenv("EMOJISCRIPT_VERBOSE", raising=False)


@pytest.fixture
def write_source(tmp_path):
    def _write(text, name="program.html"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


class TestTranspileCommand:

    def test_prints_output(self, write_source, capsys):
        main(["transpile", write_source('<print>"hi"</print>')])
        assert capsys.readouterr().out == 'console.log("hi");\n'

    def test_typescript_target(self, write_source, capsys):
        main(["transpile", write_source('<let name="n" value="1" type="number"/>'), "--target", "typescript"])
        assert capsys.readouterr().out == "let n: number = 1;\n"

    def test_errors_exit_one_with_partial_output(self, write_source, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["transpile", write_source("<print>1</print><print>oops")])
        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert captured.out.startswith("console.log(1);\n")
        assert "✗ unclosed tag <print> at line 1, column 17" in captured.err

    def test_warnings_go_to_stderr(self, write_source, capsys):
        main(["transpile", write_source("<blink/>")])
        captured = capsys.readouterr()
        assert captured.out == "/* Unknown tag: <blink> */\n"
        assert "⚠ unknown tag: <blink>" in captured.err

    def test_json_output(self, write_source, capsys):
        main(["transpile", write_source("<break/>"), "--json"])
        payload = json.loads(capsys.readouterr().out)
        assert payload == {"success": True, "output": "break;\n", "errors": [], "warnings": []}

    def test_emoji_mode(self, write_source, capsys):
        main(["transpile", write_source('📝("hi")', name="hello.emoji"), "--emoji"])
        assert capsys.readouterr().out == 'console.log("hi")\n'

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("<continue/>"))
        main(["transpile", "-"])
        assert capsys.readouterr().out == "continue;\n"

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["transpile", str(tmp_path / "missing.html")])
        assert excinfo.value.code == 1
        assert "Error [CLI_FILE_NOT_FOUND]" in capsys.readouterr().err


class TestCheckCommand:

    def test_clean_file(self, write_source, capsys):
        path = write_source("<print>1</print><print>2</print>")
        main(["check", path])
        out = capsys.readouterr().out
        assert "✓" in out
        assert "2 top-level tags" in out
        assert "console.log" not in out

    def test_reports_errors(self, write_source, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["check", write_source("<var/>")])
        assert excinfo.value.code == 1
        assert "✗ invalid variable: empty identifier" in capsys.readouterr().out

    def test_emoji_balance_check(self, write_source, capsys):
        with pytest.raises(SystemExit):
            main(["check", write_source("🎯 f() {"), "--emoji"])
        assert "✗ Unbalanced braces" in capsys.readouterr().out


class TestExamplesCommand:

    def test_lists_markup_examples(self, capsys):
        main(["examples", "--syntax", "markup"])
        out = capsys.readouterr().out
        assert "[basics] Hello World - Basic console output" in out

    def test_with_code(self, capsys):
        main(["examples", "--code"])
        assert '    📝("Hello, World!")' in capsys.readouterr().out


class TestParser:

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 1
        assert "usage: emojiscript" in capsys.readouterr().out

    def test_unknown_target_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["transpile", "x.html", "--target", "python"])

    def test_serve_defaults(self):
        args = build_parser().parse_args(["serve"])
        assert args.host is None
        assert args.port is None
        assert args.reload is False


class TestFormatCliError:

    def test_with_hint(self):
        message = format_cli_error(CLIFileNotFoundError("File not found: x", hint="Check the path"))
        assert message == "Error [CLI_FILE_NOT_FOUND]: File not found: x\nHint: Check the path"

    def test_verbose_context(self):
        exc = CLIValidationError("Bad input", context={"path": "a.html"})
        assert "  path: a.html" in format_cli_error(exc, verbose=True)

    def test_generic_exception(self):
        assert format_cli_error(ValueError("boom")) == "Error: ValueError: boom"


class TestServeCommand:

    def test_runs_uvicorn_with_app(self, monkeypatch, capsys):
        calls = []
        monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

        main(["serve", "--host", "0.0.0.0", "--port", "9999", "--log-level", "warn"])

        app, kwargs = calls[0]
        assert isinstance(app, FastAPI)
        assert kwargs == {"host": "0.0.0.0", "port": 9999, "log_level": "warning"}
        assert "http://0.0.0.0:9999/api/v1" in capsys.readouterr().out

    def test_reload_uses_factory_path(self, monkeypatch):
        calls = []
        monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

        main(["serve", "--reload", "--port", "9998"])

        app, kwargs = calls[0]
        assert app == "emojiscript.server.app:create_app"
        assert kwargs["factory"] is True
        assert kwargs["reload"] is True
