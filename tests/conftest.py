"""
Shared pytest fixtures for the ratmat test suite.

This module provides:
- Sample matrices with known determinants and inverses
- Settings fixtures that isolate RATMAT_* environment variables
- A helper for asserting the error kind and details of LinAlgErrors
"""

import logging
from fractions import Fraction
from typing import Any, Callable

import pytest

from ratmat.core.config import get_settings
from ratmat.core.errors import ErrorKind, LinAlgError
from ratmat.math.geometric import Matrix


@pytest.fixture
def known_determinants() -> list[tuple[Matrix, Any]]:
    """Matrices paired with their hand-computed determinants."""
    return [
        (Matrix([[5]]), 5),
        (Matrix([[1, 2], [3, 4]]), -2),
        (Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 10]]), -3),
        (Matrix([[2, 0, 0, 0], [0, 3, 0, 0], [0, 0, 4, 0], [0, 0, 0, 5]]), 120),
        (Matrix([[Fraction(1, 2), 1], [1, 4]]), 1),
    ]


@pytest.fixture
def invertible_matrices() -> list[Matrix]:
    """Square matrices with non-zero determinant and non-unit denominators."""
    return [
        Matrix([[7]]),
        Matrix([[1, 2], [3, 4]]),
        Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 10]]),
        Matrix([[2, -1, 0, 3], [1, 1, 4, 0], [0, 5, 1, 2], [3, 0, 2, 1]]),
        Matrix([[Fraction(1, 3), 2], [5, Fraction(-1, 2)]]),
    ]


@pytest.fixture
def isolated_settings(monkeypatch, tmp_path):
    """Clear cached settings and run from an empty directory without a .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "COFACTOR_WARN_DIMENSION"):
        monkeypatch.delenv(f"RATMAT_{name}", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def package_logger():
    """Restore the ratmat logger after a test reconfigures it."""
    logger = logging.getLogger("ratmat")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def assert_linalg_error():
    """Helper asserting that a call raises a LinAlgError of the expected kind."""
    def _assert(
        kind: ErrorKind,
        call: Callable[..., Any],
        /,
        *args: Any,
        **expected_details: Any,
    ) -> LinAlgError:
        with pytest.raises(LinAlgError) as exc_info:
            call(*args)

        error = exc_info.value
        assert error.kind is kind, f"Expected {kind}, got {error.kind}"
        for key, value in expected_details.items():
            assert error.details.get(key) == value, (
                f"Detail {key!r}: expected {value!r}, got {error.details.get(key)!r}"
            )
        return error

    return _assert
