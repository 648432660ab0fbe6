# mapgen/diagnostics.py
"""
Structured diagnostics emitted by the map engine.

The engine never prints. Every recoverable condition (corrected parameters,
repaired grid, rejected grid) is reported as a Diagnostic handed to an
optional callback; without one, it goes to the ``mapgen`` logger.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
import logging

PARAMS_CORRECTED = "params_corrected"
GRID_REPAIRED = "grid_repaired"
GRID_REJECTED = "grid_rejected"

logger = logging.getLogger("mapgen")

_LEVELS = {
    PARAMS_CORRECTED: logging.INFO,
    GRID_REPAIRED: logging.INFO,
    GRID_REJECTED: logging.WARNING,
}


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    fields: Tuple[str, ...] = ()
    message: str = ""

    def to_dict(self):
        return {"kind": self.kind, "fields": list(self.fields), "message": self.message}


DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diag: Diagnostic):
    level = _LEVELS.get(diag.kind, logging.INFO)
    if diag.fields:
        logger.log(level, "%s: %s [%s]", diag.kind, diag.message, ", ".join(diag.fields))
    else:
        logger.log(level, "%s: %s", diag.kind, diag.message)


def emit(on_diagnostic: Optional[DiagnosticSink], diag: Diagnostic):
    (on_diagnostic or log_diagnostic)(diag)


@dataclass
class DiagnosticLog:
    """Sink that keeps every diagnostic it receives, in order."""
    events: List[Diagnostic] = field(default_factory=list)

    def __call__(self, diag: Diagnostic):
        self.events.append(diag)

    def kinds(self) -> List[str]:
        return [d.kind for d in self.events]
