"""Decoding of Rhea RDF/XML dumps into flat records."""

from .reader import decode_records, iter_records, load_records, read_rhea
from .records import Property, Record

__all__ = [
    "Property",
    "Record",
    "decode_records",
    "iter_records",
    "load_records",
    "read_rhea",
]
