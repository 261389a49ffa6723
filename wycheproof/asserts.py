# wycheproof/asserts.py
"""
Assertion primitives used by the test-case harness.

All of them raise AssertionError so pytest (or the corpus runner) records
the failure with the given message.
"""

from __future__ import annotations

from typing import Any, NoReturn


def fail(message: str) -> NoReturn:
    raise AssertionError(message)


def assert_true(message: str, value: Any) -> None:
    if value is not True:
        fail(f"{message} (expected True, got {value!r})")


def assert_false(message: str, value: Any) -> None:
    if value is not False:
        fail(f"{message} (expected False, got {value!r})")


def assert_not_equals(message: str, a: Any, b: Any) -> None:
    if a == b:
        fail(f"{message} (did not expect {b!r})")
