"""Publication service: gates, prepares and uploads price batches.

Two error paths meet here. Validation and signing errors propagate to the
caller because a malformed or unsigned transaction must never be uploaded.
Balance-query and upload errors are absorbed: they are logged and counted,
and the caller's loop carries on with the next cycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pricekeeper.core.config import PublisherConfig
from pricekeeper.core.interfaces import TransactionClient
from pricekeeper.core.logging import get_logger, log_context
from pricekeeper.core.models import (
    BalanceSnapshot,
    PreparedTransaction,
    PriceBatch,
    PublicationResult,
)
from pricekeeper.core.monitoring import PerformanceTracker
from pricekeeper.core.services.transform import redact
from pricekeeper.core.validation import validate_batch

if TYPE_CHECKING:
    from loguru import Logger

PREPARE_SPAN = "transaction-preparing"
UPLOAD_SPAN = "keeping"


def log_absorbed_failure(
    logger: Logger,
    tracker: PerformanceTracker,
    operation: str,
    message: str,
    error: BaseException,
) -> None:
    """Report a failure that is deliberately kept away from the caller."""

    tracker.collector.increment_absorbed_failure(operation)
    logger.bind(operation=operation).opt(exception=error).error(message)


class PublicationService:
    """Prepares price batches as signed transactions and uploads them."""

    def __init__(
        self,
        client: TransactionClient,
        min_balance: float,
        *,
        omit_sources: bool = False,
        skip_when_balance_low: bool = False,
        logger: Any | None = None,
        tracker: PerformanceTracker | None = None,
    ) -> None:
        self._client = client
        self._min_balance = min_balance
        self._omit_sources = omit_sources
        self._skip_when_balance_low = skip_when_balance_low
        self._logger = logger or get_logger("PublicationService")
        self._tracker = tracker or PerformanceTracker()

    @classmethod
    def from_config(
        cls,
        client: TransactionClient,
        config: PublisherConfig,
        **kwargs: Any,
    ) -> PublicationService:
        return cls(
            client,
            config.min_balance,
            omit_sources=config.omit_sources,
            skip_when_balance_low=config.skip_when_balance_low,
            **kwargs,
        )

    @property
    def min_balance(self) -> float:
        return self._min_balance

    async def check_balance(self) -> BalanceSnapshot:
        """Read the client balance; never raises.

        A failed query is reported as a zero, low balance.
        """

        try:
            balance = float(await self._client.get_balance())
            is_balance_low = balance < self._min_balance
            self._tracker.collector.record_balance(balance)
            self._logger.info("Balance on storage network: {}", balance)
            return BalanceSnapshot(balance=balance, is_balance_low=is_balance_low)
        except Exception as e:
            log_absorbed_failure(self._logger, self._tracker, "check_balance", "Error while checking balance", e)
            return BalanceSnapshot(balance=0, is_balance_low=True)

    async def prepare(self, batch: PriceBatch, omit_source: bool | None = None) -> PreparedTransaction:
        """Validate, redact and sign a batch.

        Args:
            batch: Records sharing a single timestamp
            omit_source: Strip the ``source`` field before signing; defaults to
                the service setting

        Raises:
            EmptyBatchError: The batch has no records.
            InconsistentTimestampsError: The batch mixes timestamps.
            Exception: Whatever the client raises while signing, unchanged.
        """

        if omit_source is None:
            omit_source = self._omit_sources

        with self._tracker.span(PREPARE_SPAN):
            self._logger.info("Keeping prices in storage - preparing transaction")
            validate_batch(batch)
            records = redact(batch, omit_source)
            return await self._client.prepare_signed_transaction(records)

    async def upload(self, tx: PreparedTransaction) -> None:
        """Transmit a prepared transaction; never raises."""

        self._logger.info("Keeping data in storage - posting transaction {}", tx.id)
        with self._tracker.span(UPLOAD_SPAN):
            try:
                await self._client.transmit(tx)
            except Exception as e:
                log_absorbed_failure(self._logger, self._tracker, "upload", "Error while storing data points", e)
                return
            self._logger.info("Transaction posted: {}", tx.id)

    async def publish(self, batch: PriceBatch, omit_source: bool | None = None) -> PublicationResult:
        """Run one full cycle: balance check, prepare, upload.

        Raises the same errors as :meth:`prepare`.
        """

        with log_context():
            snapshot = await self.check_balance()
            if snapshot.is_balance_low:
                self._logger.warning("Balance {} is below minimum {}", snapshot.balance, self._min_balance)
                if self._skip_when_balance_low:
                    return PublicationResult(balance=snapshot)

            tx = await self.prepare(batch, omit_source)
            await self.upload(tx)
            return PublicationResult(balance=snapshot, transaction_id=tx.id, prepared=True)
