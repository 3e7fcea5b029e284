"""Typed failures raised by the simulation engine and orchestrator."""
from __future__ import annotations

from twocents.models.rate import IndexKind


class SimulationError(Exception):
    """Base class for every simulation failure."""


class RateUnavailable(SimulationError):
    """The rate source could not supply a value for an index."""

    def __init__(self, index_kind: IndexKind | None = None, leg: str | None = None):
        self.index_kind = index_kind
        self.leg = leg
        kind = index_kind.name if index_kind is not None else "unknown index"
        message = f"Reference rate unavailable for {kind}"
        if leg:
            message += f" ({leg} simulation)"
        super().__init__(message)


class InvalidInput(SimulationError):
    """Simulation inputs outside the domain the formulas accept."""
