#!/usr/bin/env python
"""Resolve a Rhea RDF/XML dump into reactions, compounds, reactive parts and sides."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Sequence

from rhea_rdf.core import configure_logging, get_settings
from rhea_rdf.rdf import load_records
from rhea_rdf.resolution import RheaResolver


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--dump",
        type=Path,
        default=settings.dump_path,
        help="Path to the rhea.rdf.gz dump (plain .rdf files are accepted too).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.artifacts_dir / "rhea_entities.json",
        help="Where to store the resolved entities as JSON.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Resolve partitions on this many threads (defaults to RHEA_RESOLVE_MAX_WORKERS).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    if args.workers is not None:
        settings = settings.model_copy(update={"resolve_max_workers": args.workers})
    configure_logging(args.log_level, settings=settings)

    records = load_records(args.dump)
    resolver = RheaResolver(settings)
    if settings.effective_workers > 1:
        rhea = resolver.resolve_partitioned(records)
    else:
        rhea = resolver.resolve(records)

    payload = {"counts": rhea.counts(), **rhea.as_dict()}
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    counts = ", ".join(f"{key}={value}" for key, value in rhea.counts().items())
    print(f"Resolved {len(records)} records ({counts}) into {args.output}")


if __name__ == "__main__":
    main()
