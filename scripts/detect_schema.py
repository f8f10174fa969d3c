#!/usr/bin/env python3
"""
Run schema detection over a local dataset file.

Loads a CSV, Parquet or JSON file with Polars, builds column statistics and a row
preview, and runs the detection service. Prints the detected language, semantic
field mappings, geo fields and structural patterns, and can write the full result
as JSON.

Usage examples:
  python scripts/detect_schema.py data/events.csv
  python scripts/detect_schema.py data/events.parquet --enum-mode percentage --enum-threshold 10
  python scripts/detect_schema.py data/events.json --report artifacts/schema.json --verbose
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

# Ensure local package is importable when running as a script
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import polars as pl

from schema_detection.config import ENUM_MODES, load_settings
from schema_detection.inference import build_detection_context
from schema_detection.service import create_detection_service
from schema_detection.types import DetectorConfig
from schema_detection.utils.logger import configure_logger

SUPPORTED_SUFFIXES = {".csv", ".parquet", ".json", ".ndjson", ".jsonl"}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Detect language, semantic fields, coordinates and id/enum columns of a dataset.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("path", help="CSV, Parquet or JSON file to analyse")
    ap.add_argument("--detector", type=str, default="", help="Detector name (empty = default detector)")
    ap.add_argument("--sample-rows", type=int, default=0, help="Rows used for language detection (0 = settings)")
    ap.add_argument("--enum-threshold", type=float, default=None, help="Enum threshold (count or percent)")
    ap.add_argument("--enum-mode", choices=ENUM_MODES, default=None, help="Enum threshold mode")
    ap.add_argument("--report", type=str, default="", help="Path to write the JSON result")
    ap.add_argument("--verbose", action="store_true", help="Verbose console output")
    return ap.parse_args(argv)


def read_dataset(path: Path) -> pl.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pl.read_csv(path, ignore_errors=True, infer_schema_length=10000)
    if suffix == ".parquet":
        return pl.read_parquet(path)
    if suffix in {".ndjson", ".jsonl"}:
        return pl.read_ndjson(path)
    if suffix == ".json":
        return pl.read_json(path)
    raise ValueError(f"Unsupported file type: {suffix}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    configure_logger(settings.log_level, settings.log_file)

    path = Path(args.path)
    if not path.is_file():
        print(f"[error] File not found: {path}")
        return 1
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        print(f"[error] Unsupported file type '{path.suffix}'. Use one of: {', '.join(sorted(SUPPORTED_SUFFIXES))}")
        return 1

    df = read_dataset(path)

    options = {}
    if args.enum_threshold is not None:
        options["enum_threshold"] = args.enum_threshold
    if args.enum_mode:
        options["enum_mode"] = args.enum_mode

    context = build_detection_context(
        df,
        config=DetectorConfig(options=options),
        sample_rows=args.sample_rows or settings.sample_rows,
        max_unique_samples=settings.max_unique_samples,
    )
    service = create_detection_service(settings)
    result = service.detect(args.detector or settings.default_detector, context)

    if args.report:
        report_path = Path(args.report)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")

    # Console summary
    lang = result.language
    print(f"File: {path}\nShape: {df.height} x {df.width}")
    print(f"Language: {lang.name} ({lang.code}) confidence={lang.confidence:.2f} reliable={lang.is_reliable}")

    mappings = result.field_mappings
    for label, mapping in (
        ("title", mappings.title),
        ("description", mappings.description),
        ("timestamp", mappings.timestamp),
        ("locationName", mappings.location_name),
    ):
        if mapping is not None:
            print(f"  {label} -> {mapping.path} (confidence={mapping.confidence:.2f})")
        elif args.verbose:
            print(f"  {label} -> -")

    geo = mappings.geo
    if geo is not None:
        if geo.type == "combined" and geo.combined is not None:
            print(f"  geo: combined {geo.combined.path} [{geo.combined.format}] (confidence={geo.confidence:.2f})")
        else:
            lat = geo.latitude.path if geo.latitude else "-"
            lng = geo.longitude.path if geo.longitude else "-"
            print(f"  geo: lat={lat} lng={lng} (confidence={geo.confidence:.2f})")
        if geo.location_field is not None:
            print(f"  geo location field: {geo.location_field.path}")

    print(f"  id fields: {', '.join(result.patterns.id_fields) or '-'}")
    print(f"  enum fields: {', '.join(result.patterns.enum_fields) or '-'}")
    if args.verbose:
        print(f"  columns: {', '.join(context.headers)}")
    if args.report:
        print(f"Report: {args.report}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
