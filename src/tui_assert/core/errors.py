"""Custom exception hierarchy and CLI exit codes."""

# Exit codes
EXIT_OK = 0
EXIT_GENERAL_ERROR = 1
EXIT_ASSERTION_FAILED = 2
EXIT_CONFIG_ERROR = 3

_EXIT_DESCRIPTIONS = {
    EXIT_OK: "Success",
    EXIT_GENERAL_ERROR: "General error",
    EXIT_ASSERTION_FAILED: "Assertion failed after exhausting the retry schedule",
    EXIT_CONFIG_ERROR: "Configuration file could not be loaded",
}


def exit_description(code: int) -> str:
    """Return a human-readable description for *code*."""
    return _EXIT_DESCRIPTIONS.get(code, f"Unknown error (code {code})")


class TuiAssertError(Exception):
    """Base exception for tui-assert."""

    exit_code = EXIT_GENERAL_ERROR


class AssertionFailedError(TuiAssertError):
    """A hard assertion failure. Aborts the running scenario."""

    exit_code = EXIT_ASSERTION_FAILED

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(TuiAssertError):
    """Configuration file is malformed or invalid."""

    exit_code = EXIT_CONFIG_ERROR


class ScenarioError(TuiAssertError):
    """Scenario definition error."""
