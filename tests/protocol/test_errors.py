"""Tests for the protocol error hierarchy and its JSON-RPC codes."""

from mcpaws.protocol.errors import (
    INTERNAL_ERROR,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    InvalidParamsError,
    MethodNotFoundError,
    ParseError,
    ProtocolError,
    RequestTimeoutError,
    SerializationError,
    ToolExecutionError,
    ToolNotFoundError,
)


class TestErrorHierarchy:
    def test_all_are_protocol_errors(self) -> None:
        for cls in (
            ParseError,
            MethodNotFoundError,
            InvalidParamsError,
            ToolNotFoundError,
            ToolExecutionError,
            RequestTimeoutError,
            SerializationError,
        ):
            assert issubclass(cls, ProtocolError)


class TestCodes:
    def test_parse_error(self) -> None:
        err = ParseError("bad token")
        assert err.code == PARSE_ERROR
        assert err.message == "Parse error"
        assert err.detail == "bad token"

    def test_method_not_found(self) -> None:
        err = MethodNotFoundError("nope")
        assert err.code == METHOD_NOT_FOUND
        assert err.message == "Method not found."
        assert err.method == "nope"

    def test_tool_not_found_names_tool(self) -> None:
        err = ToolNotFoundError("git_push")
        assert err.code == INTERNAL_ERROR
        assert err.message == "Unknown tool git_push"
        assert err.name == "git_push"

    def test_invalid_params_uses_internal_code(self) -> None:
        err = InvalidParamsError("name: Field required")
        assert err.code == INTERNAL_ERROR
        assert err.message == "invalid params: name: Field required"

    def test_serialization_error(self) -> None:
        err = SerializationError("circular reference")
        assert err.code == PARSE_ERROR
        assert err.message == "Response marshaling failed."

    def test_timeout(self) -> None:
        err = RequestTimeoutError(30.0)
        assert err.code == INTERNAL_ERROR
        assert "30.0s" in err.message

    def test_tool_execution_detail(self) -> None:
        err = ToolExecutionError("git_log", "git not found")
        assert "git_log" in str(err)
        assert "git not found" in str(err)


class TestProtocolError:
    def test_default_code_and_message(self) -> None:
        err = ProtocolError()
        assert err.code == INTERNAL_ERROR
        assert err.message == "Something went terribly wrong"

    def test_custom_code(self) -> None:
        err = ProtocolError("Invalid request", code=-32600)
        assert err.code == -32600
        assert str(err) == "Invalid request"

    def test_custom_code_does_not_leak_to_class(self) -> None:
        ProtocolError("x", code=-32000)
        assert ProtocolError.code == INTERNAL_ERROR
