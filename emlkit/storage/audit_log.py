"""Audit logging for import and encode events."""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional


class AuditLog:
    """Append-only JSON-lines log of EML imports and body encodings."""

    def __init__(self, log_path: Optional[Path] = None):
        """
        Initialize audit logger.

        Args:
            log_path: Path to audit log file (default: ~/.emlkit/logs/audit.log)
        """
        if log_path is None:
            log_path = Path("~/.emlkit/logs/audit.log").expanduser()

        self.log_path = log_path
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log_import(
        self,
        file_path: Path,
        status: str,
        error_type: Optional[str] = None,
        error_details: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> None:
        """
        Log an EML import.

        Args:
            file_path: Path to the imported EML file
            status: 'imported' or 'failed'
            error_type: Exception class name when the import failed
            error_details: Human-readable error description
            metadata: Additional event fields (subject, charset, ...)
        """
        event = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "eml_import",
            "file_path": str(file_path),
            "status": status,
            "error_type": error_type,
            "error_details": error_details,
            **(metadata or {}),
        }

        self._write_event(event)

    def log_encode(
        self,
        source_path: Path,
        output_path: Optional[Path],
        input_bytes: int,
        output_bytes: int,
    ) -> None:
        """Log a base64 body encoding."""
        event = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "base64_encode",
            "source_path": str(source_path),
            "output_path": str(output_path) if output_path else None,
            "input_bytes": input_bytes,
            "output_bytes": output_bytes,
        }

        self._write_event(event)

    def read_events(self) -> List[dict]:
        """
        Read all events from the log file.

        Returns:
            List of event dictionaries, oldest first
        """
        events = []

        if self.log_path.exists():
            with open(self.log_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line:
                        try:
                            events.append(json.loads(line))
                        except json.JSONDecodeError:
                            # Skip invalid lines
                            continue

        return events

    def export_events(self, output_path: Path) -> None:
        """
        Export all events to a JSON file.

        Args:
            output_path: Path to output JSON file
        """
        events = self.read_events()

        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(events, f, indent=2, ensure_ascii=False)

    def _write_event(self, event: dict) -> None:
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(event, ensure_ascii=False) + "\n")
