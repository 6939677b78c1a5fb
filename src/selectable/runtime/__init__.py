"""Runtime services (telemetry) shared across selectable."""

from . import telemetry

__all__ = ["telemetry"]
