"""String matchers used by assertions on live application state."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

TestFn = Callable[[str], tuple[bool, str]]


@dataclass(frozen=True)
class Matcher:
    """A named predicate over a string that explains its failures.

    Matchers are values: ``with_context`` builds a new matcher around the
    receiver and never changes it.
    """

    name: str
    test_fn: TestFn

    def test(self, value: str) -> tuple[bool, str]:
        ok, message = self.test_fn(value)
        if ok:
            return True, ""
        return False, message

    def with_context(self, label: str) -> Matcher:
        """Return a matcher whose failure message is prefixed by *label*."""

        def test_fn(value: str) -> tuple[bool, str]:
            ok, message = self.test(value)
            if ok:
                return True, ""
            return False, f"{label} {message}"

        return Matcher(self.name, test_fn)

    def __repr__(self) -> str:
        return f"Matcher({self.name})"


def contains(target: str) -> Matcher:
    return Matcher(
        f"contains '{target}'",
        lambda value: (
            target in value,
            f"Expected '{target}' to be found in '{value}'",
        ),
    )


def not_contains(target: str) -> Matcher:
    return Matcher(
        f"does not contain '{target}'",
        lambda value: (
            target not in value,
            f"Expected '{target}' to NOT be found in '{value}'",
        ),
    )


def matches_regexp(pattern: str) -> Matcher:
    """Unanchored regular expression search, compiled on every evaluation.

    A pattern that fails to compile is reported as a failed match rather
    than raised, so it surfaces through the normal retry exhaustion path.
    """

    def test_fn(value: str) -> tuple[bool, str]:
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            return False, f"Unexpected error parsing regular expression '{pattern}': {exc}"
        return (
            compiled.search(value) is not None,
            f"Expected '{value}' to match regular expression '{pattern}'",
        )

    return Matcher(f"matches regular expression '{pattern}'", test_fn)


def equals(target: str) -> Matcher:
    return Matcher(
        f"equals '{target}'",
        lambda value: (
            target == value,
            f"Expected '{value}' to equal '{target}'",
        ),
    )
