"""
Export of normalized entities as tables.

Converts entity lists into pandas DataFrames (enum members as their
values, tag tuples joined with ``|``), validates them against the
registered pandera schema and writes CSV or JSON.
"""

import json
import math
from dataclasses import asdict, fields
from enum import Enum
from pathlib import Path
from typing import Any

import pandas as pd

from onlycare.normalization.batch import KIND_SPECS, EntityKind
from onlycare.schemas.registry import SchemaRegistry
from onlycare.utils.logging import get_logger

log = get_logger(__name__)

TAG_SEPARATOR = "|"

SUPPORTED_FORMATS = ("csv", "json")


def _flatten_value(value: Any) -> Any:
    """Convert an entity attribute to a plain table cell."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return TAG_SEPARATOR.join(str(v) for v in value)
    return value


def _sanitize_for_json(obj: Any) -> Any:
    """
    Recursively sanitize data for JSON serialization.

    Replaces NaN/Infinity with None and numpy scalars with Python values.
    """
    if obj is None:
        return None
    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            return None
        return obj
    if isinstance(obj, dict):
        return {k: _sanitize_for_json(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_sanitize_for_json(item) for item in obj]
    if hasattr(obj, "item"):  # numpy scalar
        return _sanitize_for_json(obj.item())
    return obj


def entity_to_row(entity: Any) -> dict[str, Any]:
    """Flatten one entity into a column -> value mapping."""
    return {key: _flatten_value(value) for key, value in asdict(entity).items()}


def entities_to_frame(
    entities: list[Any],
    kind: EntityKind,
    *,
    validate: bool = True,
) -> pd.DataFrame:
    """
    Build a DataFrame from entities of one kind.

    Column order follows the entity's field order; an empty entity list
    yields an empty frame with the full set of columns.

    Args:
        entities: Entities produced by the normalization layer.
        kind: Entity kind, selects columns and schema.
        validate: Whether to validate against the registered schema.

    Returns:
        DataFrame with one row per entity.

    Raises:
        pandera.errors.SchemaError: If validation fails.
    """
    columns = [f.name for f in fields(KIND_SPECS[kind].entity)]
    df = pd.DataFrame([entity_to_row(e) for e in entities], columns=columns)

    if validate:
        df = SchemaRegistry.validate(df, kind)
        log.debug("Schema validation passed", kind=kind.value, rows=len(df))

    return df


def export_entities(
    entities: list[Any],
    kind: EntityKind,
    output_path: Path,
    fmt: str | None = None,
) -> Path:
    """
    Write entities to CSV or JSON.

    Args:
        entities: Entities of one kind.
        kind: Entity kind.
        output_path: Destination file. Parent directories are created.
        fmt: ``csv`` or ``json``; inferred from the suffix when None.

    Returns:
        Path of the written file.

    Raises:
        ValueError: If the format is not supported.
    """
    fmt = (fmt or output_path.suffix.lstrip(".") or "csv").lower()
    if fmt not in SUPPORTED_FORMATS:
        msg = f"Unsupported export format '{fmt}'. Use one of: {', '.join(SUPPORTED_FORMATS)}"
        raise ValueError(msg)

    df = entities_to_frame(entities, kind)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "csv":
        df.to_csv(output_path, index=False)
    else:
        records = _sanitize_for_json(df.to_dict(orient="records"))
        with output_path.open("w", encoding="utf-8") as f:
            json.dump(records, f, ensure_ascii=False, indent=2)

    log.info("Exported entities", kind=kind.value, rows=len(df), path=str(output_path))
    return output_path
