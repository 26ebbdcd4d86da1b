"""Tests for settings and the error model."""

from emojiscript.config import Settings
from emojiscript.errors import EmptyInputError, MarkupSyntaxError, MarkupTranspileError


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.api_prefix == "/api/v1"
        assert settings.max_code_length == 100_000
        assert settings.cache_max_size == 1000
        assert settings.rate_limit_requests == 100

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("EMOJISCRIPT_PORT", "9000")
        monkeypatch.setenv("EMOJISCRIPT_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.port == 9000
        assert settings.log_level == "debug"


class TestErrors:

    def test_str_is_message(self):
        exc = MarkupSyntaxError("expected '>' at line 1, column 7", line=1, column=7)
        assert str(exc) == "expected '>' at line 1, column 7"

    def test_describe_includes_code_and_location(self):
        exc = MarkupSyntaxError("bad", line=2, column=3)
        assert exc.describe() == "[SYNTAX_ERROR] bad (line 2:3)"

    def test_empty_input_is_a_transpile_error(self):
        exc = EmptyInputError("empty input", errors=["empty input"])
        assert isinstance(exc, MarkupTranspileError)
        assert exc.code == "EMPTY_INPUT"
        assert exc.output == ""
