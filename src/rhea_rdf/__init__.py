"""Resolve Rhea RDF/XML dumps into reactions, compounds, reactive parts and sides."""

from .core import (
    Compound,
    ContainsDecodeError,
    ReactionSide,
    Reaction,
    ReactivePart,
    RecordDecodeError,
    Rhea,
    RheaError,
)
from .rdf import Record, decode_records, load_records, read_rhea
from .resolution import ReferenceIndex, RheaResolver, parse_rhea, resolve

__all__ = [
    "Compound",
    "ContainsDecodeError",
    "Reaction",
    "ReactionSide",
    "ReactivePart",
    "Record",
    "RecordDecodeError",
    "ReferenceIndex",
    "Rhea",
    "RheaError",
    "RheaResolver",
    "decode_records",
    "load_records",
    "parse_rhea",
    "read_rhea",
    "resolve",
]
