"""Custom exception hierarchy for the Rhea RDF resolver."""

from __future__ import annotations


class RheaError(Exception):
    """Base error for the Rhea RDF resolver."""


class RecordDecodeError(RheaError):
    """Raised when the RDF/XML payload cannot be decoded into records."""


class ResolutionError(RheaError):
    """Raised when decoded records cannot be resolved into entities."""


class ContainsDecodeError(ResolutionError):
    """Raised when a `contains*` property name carries an unknown suffix."""

    def __init__(self, property_name: str, about: str | None = None) -> None:
        self.property_name = property_name
        self.about = about
        location = f" on {about}" if about else ""
        super().__init__(f"Cannot decode multiplicity from `{property_name}`{location}")
