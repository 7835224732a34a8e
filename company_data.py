"""
Company data lookup from CSV exports.

Rows are matched on a key column (trimmed, case-insensitive) and returned with
their cell values untouched under the file's own header names.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional

from config import SlidesConfig
from errors import ValidationError

logger = logging.getLogger(__name__)

CompanyRecord = Dict[str, str]


def _normalize_key(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def lookup(key: str, csv_path: Optional[str] = None,
           key_column: Optional[str] = None) -> Optional[CompanyRecord]:
    """
    Return the first row whose `key_column` matches `key`, or None.

    Raises:
        ValidationError: no path given, or the file does not exist
    """
    csv_path = csv_path or SlidesConfig.DEFAULT_CSV_PATH
    key_column = key_column or SlidesConfig.COMPANY_KEY_COLUMN
    if not csv_path:
        raise ValidationError("csvFile not set. Pass the path to a CSV file.")
    path = Path(csv_path)
    if not path.is_file():
        raise ValidationError(f"CSV file not found: {csv_path}")

    wanted = _normalize_key(key)
    with path.open(newline="", encoding=SlidesConfig.CSV_ENCODING) as handle:
        reader = csv.DictReader(handle)
        if reader.fieldnames and key_column not in reader.fieldnames:
            logger.warning(f"⚠️ Column '{key_column}' not in {path.name} headers {reader.fieldnames}")
            return None
        for row in reader:
            if wanted and _normalize_key(row.get(key_column)) == wanted:
                logger.info(f"✅ Found '{key}' in {path.name}")
                # DictReader files surplus cells under None
                return {k: v for k, v in row.items() if k is not None}

    logger.info(f"ℹ️ No row for '{key}' in {path.name}")
    return None


def format_record(record: CompanyRecord, key_column: Optional[str] = None) -> List[str]:
    """Overview slide lines: one `Header: value` per non-empty field except the key."""
    key_column = key_column or SlidesConfig.COMPANY_KEY_COLUMN
    lines = []
    for header, value in record.items():
        if header == key_column or value is None or not str(value).strip():
            continue
        lines.append(f"{header}: {str(value).strip()}")
    return lines
