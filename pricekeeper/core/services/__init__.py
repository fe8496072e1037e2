"""Publication services."""

from pricekeeper.core.services.publication import PublicationService, log_absorbed_failure
from pricekeeper.core.services.transform import redact

__all__ = ["PublicationService", "log_absorbed_failure", "redact"]
