"""Loading the triangle dataset from JSON.

The file holds a JSON array of objects, each with numeric ``x``, ``y``,
``base``, ``height`` and ``hue`` fields. Extra keys are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from .models import DATASET_SIZE, FIELDS, DataItem, DatasetError
from .utils import is_number

logger = logging.getLogger(__name__)


def parse_record(record: Any, index: int = 0) -> DataItem:
    """Convert one mapping into a ``DataItem``.

    Raises:
        DatasetError: If the record is not a mapping or a field is missing
            or not a finite number.
    """
    if not isinstance(record, dict):
        raise DatasetError(
            f"Record {index}: expected an object, got {type(record).__name__}"
        )
    values = {}
    for name in FIELDS:
        if name not in record:
            raise DatasetError(f"Record {index}: missing field '{name}'")
        value = record[name]
        if not is_number(value):
            raise DatasetError(
                f"Record {index}: field '{name}' must be a finite number, got {value!r}"
            )
        values[name] = float(value)
    return DataItem(**values)


def parse_records(
    records: Any, expected_count: Optional[int] = None
) -> List[DataItem]:
    """Convert a decoded JSON array into data items.

    Args:
        records: Decoded JSON value; must be a list of objects.
        expected_count: If given, the exact number of records required.
    """
    if not isinstance(records, list):
        raise DatasetError(
            f"Dataset must be a JSON array, got {type(records).__name__}"
        )
    if expected_count is not None and len(records) != expected_count:
        raise DatasetError(
            f"Dataset must contain exactly {expected_count} records, got {len(records)}"
        )
    return [parse_record(rec, i) for i, rec in enumerate(records)]


def load_dataset(
    path: Union[str, Path], expected_count: Optional[int] = DATASET_SIZE
) -> List[DataItem]:
    """Read and parse the dataset file.

    Raises:
        DatasetError: If the file cannot be read, is not valid JSON, or any
            record is malformed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DatasetError(f"Cannot read dataset {path}: {e}") from e

    try:
        records = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatasetError(f"Invalid JSON in {path}: {e}") from e

    items = parse_records(records, expected_count)
    logger.info("Loaded %d items from %s", len(items), path)
    return items
