"""Single-pass resolution of Rhea records into entities."""

from __future__ import annotations

from collections import Counter
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Sequence

from rhea_rdf.core.config import Settings, get_settings
from rhea_rdf.core.logging import get_logger
from rhea_rdf.core.models import Rhea
from rhea_rdf.rdf.reader import decode_records
from rhea_rdf.rdf.records import Record

from .classifier import classify
from .contains import iter_reaction_sides

LOGGER = get_logger(__name__)


class RheaResolver:
    """Resolves decoded records into reactions, compounds, reactive parts and sides.

    Each record is handled on its own: its subclass assertions are classified
    and its `contains*` properties decoded. Cross references stay as strings;
    see `ReferenceIndex` for consumer-side linkage.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def resolve(self, records: Sequence[Record]) -> Rhea:
        LOGGER.info("resolver.start", record_count=len(records))
        rhea, unrecognized = self._resolve_partition(records)
        self._log_completion(rhea, unrecognized)
        return rhea

    def resolve_partitioned(self, records: Sequence[Record]) -> Rhea:
        """Resolve fixed-size partitions concurrently and concatenate them in order."""
        size = self._settings.effective_partition_size
        partitions = [records[start : start + size] for start in range(0, len(records), size)]
        workers = min(self._settings.effective_workers, max(1, len(partitions)))
        LOGGER.info(
            "resolver.start",
            record_count=len(records),
            partition_count=len(partitions),
            workers=workers,
        )

        rhea = Rhea()
        unrecognized: Counter[str] = Counter()
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures: list[Future[tuple[Rhea, Counter[str]]]] = [
                executor.submit(self._resolve_partition, partition) for partition in partitions
            ]
            try:
                for future in futures:
                    partial, missed = future.result()
                    rhea.extend(partial)
                    unrecognized.update(missed)
            except Exception:
                for future in futures:
                    future.cancel()
                raise
        self._log_completion(rhea, unrecognized)
        return rhea

    @staticmethod
    def _resolve_partition(records: Sequence[Record]) -> tuple[Rhea, Counter[str]]:
        rhea = Rhea()
        unrecognized: Counter[str] = Counter()
        for record in records:
            classification = classify(record)
            rhea.reactions.extend(classification.reactions)
            rhea.compounds.extend(classification.compounds)
            rhea.reactive_parts.extend(classification.reactive_parts)
            unrecognized.update(classification.unrecognized)
            rhea.reaction_sides.extend(iter_reaction_sides(record))
        return rhea, unrecognized

    @staticmethod
    def _log_completion(rhea: Rhea, unrecognized: Counter[str]) -> None:
        if unrecognized:
            for subclass, count in unrecognized.most_common():
                LOGGER.debug("resolver.unrecognized_subclass", subclass=subclass, count=count)
            LOGGER.info(
                "resolver.unrecognized_subclasses",
                distinct=len(unrecognized),
                total=sum(unrecognized.values()),
            )
        LOGGER.info("resolver.complete", **rhea.counts())


def resolve(records: Sequence[Record], settings: Settings | None = None) -> Rhea:
    """Functional wrapper around RheaResolver."""
    return RheaResolver(settings).resolve(records)


def parse_rhea(data: bytes, settings: Settings | None = None) -> Rhea:
    """Decode a raw RDF/XML payload and resolve it."""
    return resolve(decode_records(data), settings)
