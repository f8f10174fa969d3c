from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import polars as pl

from schema_detection.types import DetectionContext, DetectorConfig, FieldStatistics, NumericStats

DATE_STRING_RE = r"^(\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}:\d{2})?|\d{1,2}/\d{1,2}/\d{2,4})$"

# format name -> pattern counted over string values
STRING_FORMATS = {
    "email": r"^[^\s@]+@[^\s@]+\.[^\s@]+$",
    "url": r"^https?://\S+",
    "dateTime": r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}",
    "date": r"^\d{4}-\d{2}-\d{2}$",
    "numeric": r"^-?\d+(\.\d+)?$",
}

ENUM_CANDIDATE_LIMIT = 50
MAX_NESTING_DEPTH = 3


def flatten_structs(df: pl.DataFrame, max_depth: int = MAX_NESTING_DEPTH) -> pl.DataFrame:
    """
    Expand struct columns into dotted columns (`venue.geo.lat`), at most `max_depth` levels deep.

    Structs nested deeper than that stay single columns and are profiled as objects.
    """
    for _ in range(max_depth):
        if not any(isinstance(dtype, pl.Struct) for dtype in df.dtypes):
            break
        columns: List[pl.Series] = []
        for col in df.columns:
            series = df[col]
            if isinstance(series.dtype, pl.Struct) and series.dtype.fields:
                inner = series.struct.unnest()
                columns.extend(inner[name].alias(f"{col}.{name}") for name in inner.columns)
            else:
                columns.append(series)
        df = pl.DataFrame(columns)
    return df


def _is_string(dtype: pl.DataType) -> bool:
    return dtype == pl.Utf8


def _is_temporal(dtype: pl.DataType) -> bool:
    return dtype.is_temporal()


def _type_distribution(series: pl.Series) -> Dict[str, int]:
    """Count value types of a null-free series, using the schema builder's type names."""
    total = series.len()
    if total == 0:
        return {}

    dtype = series.dtype
    if _is_string(dtype):
        is_date = series.str.contains(DATE_STRING_RE)
        is_bool = series.is_in(["true", "false"])
        counts = {
            "date": int(is_date.sum()),
            "boolean-string": int((is_bool & ~is_date).sum()),
        }
        counts["string"] = total - counts["date"] - counts["boolean-string"]
    elif dtype.is_integer():
        counts = {"integer": total}
    elif dtype.is_float():
        integral = int((series.cast(pl.Float64) % 1 == 0).sum())
        counts = {"integer": integral, "number": total - integral}
    elif dtype == pl.Boolean:
        counts = {"boolean": total}
    elif _is_temporal(dtype):
        counts = {"date": total}
    elif isinstance(dtype, pl.List):
        counts = {"array": total}
    else:
        counts = {"object": total}
    return {name: count for name, count in counts.items() if count > 0}


def _string_formats(series: pl.Series) -> Dict[str, int]:
    dtype = series.dtype
    if series.len() == 0:
        return {}
    if dtype == pl.Date:
        return {"date": series.len()}
    if _is_temporal(dtype):
        return {"dateTime": series.len()}
    if not _is_string(dtype):
        return {}

    formats = {name: int(series.str.contains(pattern).sum()) for name, pattern in STRING_FORMATS.items()}
    return {name: count for name, count in formats.items() if count > 0}


def _numeric_stats(series: pl.Series) -> Optional[NumericStats]:
    if series.len() == 0 or not series.dtype.is_numeric():
        return None
    values = series.cast(pl.Float64)
    return NumericStats(
        min=float(values.min()),
        max=float(values.max()),
        avg=float(values.mean()),
        is_integer=series.dtype.is_integer() or bool((values % 1 == 0).all()),
    )


def _unique_samples(series: pl.Series, limit: int) -> List[Any]:
    if _is_temporal(series.dtype):
        series = series.cast(pl.Utf8)
    return series.unique(maintain_order=True).head(limit).to_list()


def build_field_statistics(df: pl.DataFrame, max_unique_samples: int = 100) -> Dict[str, FieldStatistics]:
    """
    Compute per-column statistics for a dataset preview.

    Struct columns are first flattened into dotted paths; each resulting column becomes
    one FieldStatistics keyed by its path, with `depth` counting the dots.
    """
    df = flatten_structs(df)
    now = datetime.now(timezone.utc)
    height = df.height
    stats: Dict[str, FieldStatistics] = {}

    for col in df.columns:
        series = df[col]
        null_count = series.null_count()
        non_null = series.drop_nulls()
        if _is_string(series.dtype):
            # empty cells from CSV imports count as missing
            empty = int((non_null == "").sum())
            null_count += empty
            non_null = non_null.filter(non_null != "")

        type_distribution = _type_distribution(non_null)
        if null_count:
            type_distribution["null"] = null_count
        unique_values = non_null.n_unique() if non_null.len() else 0

        stats[col] = FieldStatistics(
            path=col,
            occurrences=height,
            occurrence_percent=100.0 if height else 0.0,
            null_count=null_count,
            unique_values=unique_values,
            unique_samples=_unique_samples(non_null, max_unique_samples),
            type_distribution=type_distribution,
            formats=_string_formats(non_null),
            numeric_stats=_numeric_stats(non_null),
            is_enum_candidate=1 < unique_values <= ENUM_CANDIDATE_LIMIT and unique_values < height,
            first_seen=now,
            last_seen=now,
            depth=col.count("."),
        )
    return stats


def build_detection_context(
    df: pl.DataFrame,
    config: Optional[DetectorConfig] = None,
    sample_rows: int = 100,
    max_unique_samples: int = 100,
) -> DetectionContext:
    """Build a DetectionContext (statistics, first rows, headers) from a DataFrame."""
    df = flatten_structs(df)
    return DetectionContext(
        field_stats=build_field_statistics(df, max_unique_samples=max_unique_samples),
        sample_data=df.head(sample_rows).to_dicts(),
        headers=list(df.columns),
        config=config or DetectorConfig(),
    )
