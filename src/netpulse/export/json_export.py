"""
JSON export of a filtered event view.

The document is a JSON array with one record per event, every field
present, in view order. load_events() reverses it exactly.
"""
import json
import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from ..models.packet import Event

logger = logging.getLogger(__name__)


def export_filename(day: Optional[date] = None) -> str:
    """packets_YYYY-MM-DD.json for the given (default: current) date."""
    day = day or date.today()
    return f"packets_{day.isoformat()}.json"


@dataclass(frozen=True)
class ExportDocument:
    filename: str
    content: str
    record_count: int

    def write(self, directory: str = ".") -> str:
        """Write the document into directory and return its path. Raises OSError."""
        path = os.path.join(directory, self.filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.content)
        logger.info("Exported %d events to %s", self.record_count, path)
        return path


def build_export(view: Iterable[Event], day: Optional[date] = None) -> ExportDocument:
    records = [event.to_dict() for event in view]
    content = json.dumps(records, indent=2, ensure_ascii=True)
    return ExportDocument(
        filename=export_filename(day),
        content=content,
        record_count=len(records),
    )


def load_events(content: str) -> List[Event]:
    """Parse an export document back into events."""
    records = json.loads(content)
    if not isinstance(records, list):
        raise ValueError("export document must be a JSON array")
    return [Event.from_dict(record) for record in records]
