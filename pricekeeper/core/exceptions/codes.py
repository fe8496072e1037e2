"""Standardized error codes for pricekeeper exceptions."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by pricekeeper exceptions."""

    EMPTY_BATCH = "EMPTY_BATCH"
    INCONSISTENT_TIMESTAMPS = "INCONSISTENT_TIMESTAMPS"
    CONFIGURATION = "CONFIGURATION_ERROR"
