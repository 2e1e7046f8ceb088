"""Shared constant values for the Rhea RDF vocabulary."""

from __future__ import annotations

from typing import Final

RHEA_NAMESPACE: Final[str] = "http://rdf.rhea-db.org/"
RDF_NAMESPACE: Final[str] = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"

DIRECTIONAL_REACTION: Final[str] = f"{RHEA_NAMESPACE}DirectionalReaction"
BIDIRECTIONAL_REACTION: Final[str] = f"{RHEA_NAMESPACE}BidirectionalReaction"
SMALL_MOLECULE: Final[str] = f"{RHEA_NAMESPACE}SmallMolecule"
POLYMER: Final[str] = f"{RHEA_NAMESPACE}Polymer"
GENERIC_POLYPEPTIDE: Final[str] = f"{RHEA_NAMESPACE}GenericPolypeptide"
GENERIC_POLYNUCLEOTIDE: Final[str] = f"{RHEA_NAMESPACE}GenericPolynucleotide"
GENERIC_HETEROPOLYSACCHARIDE: Final[str] = f"{RHEA_NAMESPACE}GenericHeteropolysaccharide"
REACTIVE_PART: Final[str] = f"{RHEA_NAMESPACE}ReactivePart"

# Parent classification assertions point into the ChEBI ontology.
CHEBI_MARKER: Final[str] = "CHEBI"

CONTAINS_PREFIX: Final[str] = "contains"


def strip_namespace(uri: str) -> str:
    """Return the local part of a Rhea vocabulary URI."""
    return uri.removeprefix(RHEA_NAMESPACE)
