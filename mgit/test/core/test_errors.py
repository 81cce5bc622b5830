"""Tests for mgit.core.errors module."""

from mgit.core.errors import ErrorCode


def test_exit_codes_are_stable() -> None:
    assert int(ErrorCode.OK) == 0
    assert int(ErrorCode.USER_ERROR) == 1
    assert int(ErrorCode.USAGE_ERROR) == 2
    assert int(ErrorCode.COMMAND_ERROR) == 3

