"""Article validation: structural shape checks plus reference integrity."""

from __future__ import annotations

from .article import assert_valid_create, assert_valid_update, validate_create, validate_update
from .schema import FieldError, check_block_data, check_create_shape, check_update_shape

__all__ = [
    "FieldError",
    "assert_valid_create",
    "assert_valid_update",
    "check_block_data",
    "check_create_shape",
    "check_update_shape",
    "validate_create",
    "validate_update",
]
