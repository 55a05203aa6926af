"""Tests for domain error to HTTP mapping."""

from unittest.mock import MagicMock

from fastapi import HTTPException

from checkpoint_api.modules.common.exceptions import CheckpointNotFoundError, DomainError, EmbeddingDimensionError
from checkpoint_api.modules.common.utils.error_handler import handle_exception, map_exception


def test_not_found_maps_to_404():
    error = map_exception(CheckpointNotFoundError())

    assert error.status_code == 404
    assert error.detail == "Checkpoint not found"


def test_dimension_error_maps_to_422():
    error = map_exception(EmbeddingDimensionError(checkpoint_id=4, expected=5, actual=3))

    assert error.status_code == 422
    assert "Checkpoint 4" in error.detail


def test_unmapped_domain_error_is_500():
    assert map_exception(DomainError("odd")).status_code == 500


def test_handle_exception_passes_http_exceptions_through():
    original = HTTPException(status_code=409, detail="conflict")

    assert handle_exception(original) is original


def test_handle_exception_hides_unexpected_errors():
    logger = MagicMock()

    error = handle_exception(RuntimeError("connection reset"), logger)

    assert error.status_code == 500
    assert error.detail == "Internal server error"
    logger.error.assert_called_once()
