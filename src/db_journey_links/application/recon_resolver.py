"""Run the recon strategies in priority order."""

from collections.abc import Sequence

from db_journey_links.application.recon_strategies import (
    HkiReconStrategy,
    ReconStrategy,
    ScJsonReconStrategy,
    StructuredReconStrategy,
)
from db_journey_links.domain.errors import ReconResolutionError
from db_journey_links.domain.models import ReconContext, ReconFailure, ReconResult, StationIds
from db_journey_links.domain.ports import BookingClient, EventLogger


class ReconResolver:
    """Try each strategy in turn; the first one that yields two ids wins."""

    def __init__(self, strategies: Sequence[ReconStrategy], event_logger: EventLogger) -> None:
        """Initialize with strategies in priority order.

        Args:
            strategies: Strategies, most preferred first.
            event_logger: Receives one event per failed strategy.
        """
        if not strategies:
            raise ValueError("ReconResolver needs at least one strategy")
        self._strategies = list(strategies)
        self._event_logger = event_logger

    @classmethod
    def with_default_strategies(
        cls, booking_client: BookingClient, event_logger: EventLogger
    ) -> "ReconResolver":
        """Structured API first, then the HKI scrape, then the SC blob."""
        return cls(
            [
                StructuredReconStrategy(booking_client),
                HkiReconStrategy(),
                ScJsonReconStrategy(),
            ],
            event_logger,
        )

    @property
    def strategy_names(self) -> list[str]:
        return [strategy.name for strategy in self._strategies]

    async def _attempt(self, strategy: ReconStrategy, context: ReconContext) -> ReconResult:
        try:
            return await strategy.attempt(context)
        except Exception as e:  # noqa: BLE001
            return ReconFailure(strategy.name, f"{type(e).__name__}: {e}")

    async def resolve(self, context: ReconContext) -> StationIds:
        """Return the station tokens of the booking.

        Raises:
            ReconResolutionError: If every strategy failed.
        """
        failures: list[tuple[str, str]] = []
        for strategy in self._strategies:
            result = await self._attempt(strategy, context)
            if isinstance(result, ReconFailure):
                failures.append((result.strategy, result.reason))
                self._event_logger.info(
                    "recon_strategy_failed",
                    vbid=context.vbid,
                    strategy=result.strategy,
                    reason=result.reason,
                )
                continue

            self._event_logger.info(
                "recon_resolved",
                vbid=context.vbid,
                strategy=result.strategy,
                depart_id=result.station_ids.depart_id,
                arrival_id=result.station_ids.arrival_id,
            )
            return result.station_ids

        self._event_logger.error(
            "recon_exhausted",
            vbid=context.vbid,
            strategies=",".join(name for name, _ in failures),
        )
        raise ReconResolutionError(
            f"Could not resolve stations for booking {context.vbid}: "
            + "; ".join(f"{name}: {reason}" for name, reason in failures),
            failures=failures,
        )
