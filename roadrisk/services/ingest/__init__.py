from roadrisk.services.ingest.loader import (
    IncidentBatch,
    RejectedRow,
    load_incidents,
    parse_incident,
    parse_incidents,
)

__all__ = [
    "IncidentBatch",
    "RejectedRow",
    "load_incidents",
    "parse_incident",
    "parse_incidents",
]
