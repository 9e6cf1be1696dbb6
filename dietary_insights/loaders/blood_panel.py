"""
Blood panel loader.

Parses lab panel records (JSON list) into BloodWork snapshots.
"""

import json
import logging
from pathlib import Path
from typing import Union, List, Dict, Any, Iterable, Optional

from dietary_insights.errors import BloodPanelError
from dietary_insights.models import BloodWork, latest_blood_work
from dietary_insights.utils.timefmt import parse_timestamp

logger = logging.getLogger(__name__)


class BloodPanelLoader:
    """Loader for blood work exports."""

    # Model field -> accepted source keys
    VALUE_KEYS = {
        'total_cholesterol': ['totalCholesterol', 'total_cholesterol'],
        'ldl': ['ldl'],
        'hdl': ['hdl'],
        'triglycerides': ['triglycerides'],
        'fasting_glucose': ['fastingGlucose', 'fasting_glucose'],
    }
    DATE_KEYS = ['testDate', 'test_date']

    def __init__(self, filepath: Union[str, Path]):
        """Initialize loader with file path.

        Args:
            filepath: Path to a JSON file holding a list of panels
                (or an object with a ``bloodWork`` list).
        """
        self.filepath = Path(filepath)
        self._records: Optional[List[BloodWork]] = None

    def load(self) -> List[BloodWork]:
        with open(self.filepath, 'r') as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = data.get('bloodWork', data.get('blood_work', []))

        self._records = self.from_records(data)
        logger.info("Loaded %d blood panels from %s", len(self._records), self.filepath)
        return self._records

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> List[BloodWork]:
        return [blood_work_from_record(record) for record in records]

    @property
    def records(self) -> List[BloodWork]:
        if self._records is None:
            self._records = self.load()
        return self._records

    def latest(self) -> Optional[BloodWork]:
        """Most recent panel by test date."""
        return latest_blood_work(self.records)


def blood_work_from_record(record: Dict[str, Any]) -> BloodWork:
    """Build a BloodWork from one raw document.

    Values may sit at the top level or under a ``results`` mapping.

    Raises:
        BloodPanelError: if the id or test date is missing, or a value is
            not numeric.
    """
    record_id = record.get('id')
    if record_id is None:
        raise BloodPanelError(f"Blood work record has no id: {record!r}")

    raw_date = next((record[k] for k in BloodPanelLoader.DATE_KEYS if record.get(k) is not None), None)
    if raw_date is None:
        raise BloodPanelError(f"Blood work {record_id} has no test date")
    try:
        test_date = parse_timestamp(raw_date)
    except ValueError as exc:
        raise BloodPanelError(f"Blood work {record_id} has an invalid test date: {exc}") from exc

    source = {**record, **(record.get('results') or {})}
    values = {}
    for field_name, keys in BloodPanelLoader.VALUE_KEYS.items():
        raw = next((source[k] for k in keys if source.get(k) is not None), None)
        if raw is None or raw == '':
            values[field_name] = None
            continue
        try:
            values[field_name] = int(round(float(raw)))
        except (TypeError, ValueError) as exc:
            raise BloodPanelError(
                f"Blood work {record_id} has non-numeric {field_name}: {raw!r}"
            ) from exc

    return BloodWork(id=str(record_id), test_date=test_date, notes=record.get('notes'), **values)
