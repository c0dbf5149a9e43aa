"""
Incident ingestion boundary.

Turns raw rows (dicts from JSON or CSV) into IncidentRecord values. A row
that fails validation raises a DataError, or with skip_invalid=True is
logged and left out of the batch. Severity is never defaulted.
"""
import csv
import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from roadrisk.core.errors import DataError, IncidentValidationError, InvalidSeverityError
from roadrisk.core.types import IncidentRecord, Severity

logger = logging.getLogger(__name__)

_SEVERITIES = frozenset(s.value for s in Severity)


@dataclass
class RejectedRow:
    """A row left out of the batch."""
    index: int
    error: str
    row: dict[str, Any] = field(default_factory=dict)


@dataclass
class IncidentBatch:
    """Parsed incidents plus the rows that were skipped."""
    records: list[IncidentRecord] = field(default_factory=list)
    rejected: list[RejectedRow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


def parse_incident(row: Any, index: int = 0) -> IncidentRecord:
    """
    Validate one raw row.

    Raises:
        InvalidSeverityError: Severity outside minor/moderate/severe/fatal
        IncidentValidationError: Row is not a mapping, or any other malformed field
    """
    if not isinstance(row, Mapping):
        raise IncidentValidationError(index, f"expected an object, got {type(row).__name__}")
    severity = row.get("severity")
    if isinstance(severity, Severity):
        severity = severity.value
    if not isinstance(severity, str) or severity not in _SEVERITIES:
        incident_id = row.get("id")
        raise InvalidSeverityError(severity, str(incident_id) if incident_id else None)
    try:
        return IncidentRecord.model_validate(dict(row))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise IncidentValidationError(index, problems) from e


def parse_incidents(
    rows: Iterable[Any], skip_invalid: bool = False
) -> IncidentBatch:
    """
    Validate a sequence of raw rows.

    Args:
        rows: Raw incident mappings (camelCase or snake_case keys)
        skip_invalid: Log and drop bad rows instead of raising

    Returns:
        IncidentBatch with valid records in input order
    """
    batch = IncidentBatch()
    for index, row in enumerate(rows):
        try:
            batch.records.append(parse_incident(row, index))
        except DataError as e:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping incident #{index}: {e.message}")
            raw = dict(row) if isinstance(row, Mapping) else {"value": row}
            batch.rejected.append(RejectedRow(index=index, error=e.message, row=raw))

    if batch.rejected:
        logger.info(
            f"Ingested {len(batch.records)} incidents, skipped {len(batch.rejected)}"
        )
    return batch


def _read_rows(path: Path) -> list[dict[str, Any]]:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        with path.open(newline="", encoding="utf-8-sig") as handle:
            return [
                {key: value for key, value in row.items() if value not in (None, "")}
                for row in csv.DictReader(handle)
            ]
    if suffix == ".json":
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
        if isinstance(data, Mapping):
            data = data.get("incidents")
        if not isinstance(data, list):
            raise DataError(f"{path} must contain a list of incidents")
        return data
    raise DataError(f"Unsupported incident file type '{suffix}' for {path}")


def load_incidents(path: str | Path, skip_invalid: bool = False) -> IncidentBatch:
    """Load incidents from a JSON array or a CSV file with a header row."""
    path = Path(path)
    try:
        rows = _read_rows(path)
    except json.JSONDecodeError as e:
        raise DataError(f"Cannot parse {path}: {e}") from e
    except OSError as e:
        raise DataError(f"Cannot read {path}: {e}") from e
    return parse_incidents(rows, skip_invalid=skip_invalid)
