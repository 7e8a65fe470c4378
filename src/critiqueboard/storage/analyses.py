"""JSON-file store for critique sessions."""

import hashlib
import json
import logging
import re
from pathlib import Path

from ..models import AnalysisRecord
from ..text.merge import aggressive_merge_points
from ..text.split import format_synthesized_point

logger = logging.getLogger(__name__)


class AnalysisStore:
    """Persists AnalysisRecords as one JSON file each."""

    def __init__(self, analyses_path: str):
        self.analyses_path = Path(analyses_path)

    def save(self, record: AnalysisRecord) -> Path:
        """Write a record and return its path."""
        self.analyses_path.mkdir(parents=True, exist_ok=True)
        digest = hashlib.sha256(
            json.dumps(record.decisions + record.full, sort_keys=True).encode("utf-8")
        ).hexdigest()[:12]
        stamp = re.sub(r"[^0-9T]", "", record.timestamp)[:15] or "undated"
        file_path = self.analyses_path / f"{stamp}-{digest}.json"

        counter = 1
        while file_path.exists():
            file_path = self.analyses_path / f"{stamp}-{digest}_{counter}.json"
            counter += 1

        file_path.write_text(json.dumps(record.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(f"Analysis saved to {file_path}")
        return file_path

    def load_all(self) -> list[AnalysisRecord]:
        """Load every stored record, oldest file name first."""
        if not self.analyses_path.exists():
            return []

        records = []
        for file_path in sorted(self.analyses_path.glob("*.json")):
            try:
                data = json.loads(file_path.read_text(encoding="utf-8"))
                records.append(AnalysisRecord.from_dict(data))
            except (OSError, json.JSONDecodeError, AttributeError, TypeError) as e:
                logger.warning(f"Skipping unreadable analysis {file_path.name}: {e}")
        return records

    def synthesized_points(self, max_points: int = 10, strategy=None) -> list[str]:
        """Merge the points of all stored analyses into a short, readable list."""
        try:
            records = self.load_all()
        except OSError as e:
            logger.error(f"Error reading analyses: {e}")
            return []

        # dict keeps first-seen order while dropping exact repeats
        all_points: dict[str, None] = {}
        for record in records:
            for point in record.simplified + record.full:
                all_points[point] = None

        merged = aggressive_merge_points(list(all_points), strategy=strategy, max_points=max_points)
        return [format_synthesized_point(p) for p in merged]
