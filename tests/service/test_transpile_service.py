"""Tests for the transpile service."""

import pytest

from emojiscript.errors import EmptyOutputError, InputValidationError
from emojiscript.service import TranspileRequest, TranspileService, detect_markup, validate_code


class TestDetectMarkup:

    @pytest.mark.parametrize("code", ['<print>1</print>', '<VAR name="x"/>', "x\n<loop times=\"2\">y</loop>"])
    def test_markup_detected(self, code):
        assert detect_markup(code)

    @pytest.mark.parametrize("code", ['📝("hi")', "a < b", "<div>x</div>"])
    def test_not_markup(self, code):
        assert not detect_markup(code)


class TestValidateCode:

    def test_balanced(self):
        report = validate_code("f(x) { g() }")
        assert report.valid
        assert report.errors == []

    def test_empty(self):
        assert validate_code("").errors == ["Code cannot be empty"]

    def test_unbalanced(self):
        report = validate_code("{ (")
        assert not report.valid
        assert report.errors == ["Unbalanced braces", "Unbalanced parentheses"]


class TestInputValidation:

    def test_empty_code(self, service):
        with pytest.raises(InputValidationError, match="code cannot be empty"):
            service.transpile(TranspileRequest(code=""))

    def test_too_long(self):
        service = TranspileService(max_code_length=10)
        with pytest.raises(InputValidationError, match="code exceeds maximum length"):
            service.transpile(TranspileRequest(code="x" * 11))

    @pytest.mark.parametrize("code", ["eval(1)", "EXEC(x)", "import subprocess", "os.system('ls')", "__import__"])
    def test_unsafe_input(self, service, code):
        with pytest.raises(InputValidationError, match="unsafe pattern detected"):
            service.transpile(TranspileRequest(code=code))

    def test_unsupported_target(self, service):
        with pytest.raises(InputValidationError, match="unsupported target language"):
            service.transpile(TranspileRequest(code="<print>1</print>", targetLanguage="python"))


class TestTranspile:

    def test_markup_detected_and_transpiled(self, service):
        response = service.transpile(TranspileRequest(code="<print>1</print>"))
        assert response.success
        assert response.output == "console.log(1);\n"
        assert response.used_markup
        assert response.target_language == "javascript"
        assert response.metadata["cached"] is False
        assert isinstance(response.metadata["transpileTime"], int)

    def test_emoji_path(self, service):
        response = service.transpile(TranspileRequest(code='📝("hi")'))
        assert response.success
        assert response.output == 'console.log("hi")'
        assert not response.used_markup

    def test_forced_markup(self, service):
        response = service.transpile(TranspileRequest(code="<break/>", useMarkup=True))
        assert response.output == "break;\n"
        assert response.used_markup

    def test_typescript_target(self, service):
        request = TranspileRequest(code='<let name="n" value="1" type="number"/>', target_language="typescript")
        response = service.transpile(request)
        assert response.output == "let n: number = 1;\n"
        assert response.target_language == "typescript"

    def test_markup_errors_are_not_raised(self, service):
        response = service.transpile(TranspileRequest(code="<print>1</print><print>oops"))
        assert not response.success
        assert response.output.startswith("console.log(1);\n")
        assert response.errors == ["unclosed tag <print> at line 1, column 17"]

    def test_warnings_are_returned(self, service):
        response = service.transpile(TranspileRequest(code="<print>1</print><blink/>"))
        assert response.success
        assert response.warnings == ["unknown tag: <blink>"]

    def test_empty_output(self, service):
        with pytest.raises(EmptyOutputError):
            service.transpile(TranspileRequest(code="   "))


class TestCaching:

    def test_second_request_is_cached(self, service, cache):
        request = TranspileRequest(code="<print>1</print>")
        first = service.transpile(request)
        second = service.transpile(request)
        assert first.metadata["cached"] is False
        assert second.metadata["cached"] is True
        assert second.output == first.output
        assert cache.stats["hits"] == 1

    def test_cached_copy_is_not_shared(self, service):
        request = TranspileRequest(code="<print>1</print>")
        service.transpile(request)
        hit = service.transpile(request)
        hit.output = "mutated"
        assert service.transpile(request).output == "console.log(1);\n"

    def test_failures_are_not_cached(self, service, cache):
        service.transpile(TranspileRequest(code="<print>oops"))
        assert len(cache) == 0

    def test_target_is_part_of_the_key(self, service, cache):
        service.transpile(TranspileRequest(code="<print>1</print>"))
        service.transpile(TranspileRequest(code="<print>1</print>", targetLanguage="typescript"))
        assert len(cache) == 2

    def test_works_without_cache(self):
        service = TranspileService()
        assert service.transpile(TranspileRequest(code="<print>1</print>")).success
