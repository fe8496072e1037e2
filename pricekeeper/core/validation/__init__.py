"""Batch validation."""

from pricekeeper.core.validation.batch import validate_batch

__all__ = ["validate_batch"]
