from __future__ import annotations

import httpx
import pytest

from requestsmith.core import validate_timeout

######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.1, 1.0, 10.0, 30.0, 100])
def test_validate_timeout_accepts_valid_values(timeout: float) -> None:
    validate_timeout(timeout)


def test_validate_timeout_accepts_httpx_timeout() -> None:
    validate_timeout(httpx.Timeout(5.0, connect=1.0))


def test_validate_timeout_rejects_zero() -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0, got 0"):
        validate_timeout(0)


def test_validate_timeout_rejects_negative() -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0, got -1.0"):
        validate_timeout(-1.0)


@pytest.mark.parametrize("timeout", [True, False])
def test_validate_timeout_rejects_bool(timeout: bool) -> None:
    with pytest.raises(ValueError, match=r"timeout must be a number of seconds"):
        validate_timeout(timeout)
