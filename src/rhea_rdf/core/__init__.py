"""Shared core utilities for the Rhea RDF resolver."""

from .config import Settings, get_settings
from .exceptions import (
    ContainsDecodeError,
    RecordDecodeError,
    ResolutionError,
    RheaError,
)
from .logging import configure_logging
from .models import (
    Compound,
    CompoundKind,
    ReactionSide,
    Reaction,
    ReactivePart,
    Rhea,
)

__all__ = [
    "Settings",
    "Reaction",
    "Compound",
    "CompoundKind",
    "ReactivePart",
    "ReactionSide",
    "Rhea",
    "RheaError",
    "RecordDecodeError",
    "ResolutionError",
    "ContainsDecodeError",
    "get_settings",
    "configure_logging",
]
