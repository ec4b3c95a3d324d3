"""Load run history from JSON or CSV exports."""

import csv
import datetime
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .exceptions import HistoryFormatError, HistoryNotFoundError
from .metrics.load import DEFAULT_LACTATE_THRESHOLD_HR, calculate_tss
from .models.assessment import LoadAssessment
from .models.records import RunHistory, RunRecord

logger = logging.getLogger(__name__)


class RunRecordSchema(BaseModel):
    """A single session as exported by the health-data collaborator.

    Accepts camelCase (``durationMinutes``) or snake_case keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    date: datetime.date
    duration_minutes: float = Field(gt=0)
    distance_km: float = Field(gt=0)
    avg_heart_rate: float = Field(gt=0)
    resting_heart_rate: float = Field(gt=0)
    heart_rate_variability_ms: float = Field(gt=0)
    heart_rate_recovery_bpm: float = Field(gt=0)
    vo2_max: float = Field(gt=0)
    training_stress_score: Optional[float] = Field(default=None, ge=0)

    avg_power_watts: Optional[float] = None
    steps: Optional[int] = None
    ground_contact_time_ms: Optional[float] = None
    vertical_oscillation_cm: Optional[float] = None
    active_energy_kcal: Optional[float] = None

    def to_record(self, lactate_threshold_hr: float = DEFAULT_LACTATE_THRESHOLD_HR) -> RunRecord:
        """Build a RunRecord, deriving TSS when the export does not carry it."""
        data = self.model_dump()
        if data["training_stress_score"] is None:
            data["training_stress_score"] = calculate_tss(
                self.duration_minutes, self.avg_heart_rate, lactate_threshold_hr
            )
        return RunRecord(**data)


def _clean_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Treat empty CSV cells as missing values."""
    return {k: (None if v == "" else v) for k, v in row.items() if k}


def parse_history(
    rows: Iterable[Dict[str, Any]],
    lactate_threshold_hr: float = DEFAULT_LACTATE_THRESHOLD_HR,
    source: Optional[str] = None,
) -> RunHistory:
    """
    Validate raw rows and collect them into a RunHistory.

    Rows are added in input order, so a later row for the same day replaces
    an earlier one.

    Raises:
        HistoryFormatError: If any row fails validation
    """
    history = RunHistory()
    count = 0
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise HistoryFormatError(
                f"Run record {index} is not an object", source=source,
                details={"index": index},
            )
        try:
            schema = RunRecordSchema.model_validate(_clean_row(row))
        except PydanticValidationError as e:
            raise HistoryFormatError(
                f"Invalid run record at index {index}",
                source=source,
                details={"index": index, "errors": e.errors(include_url=False)},
            ) from e
        history.add(schema.to_record(lactate_threshold_hr))
        count += 1

    if count != len(history):
        logger.warning(
            f"Collapsed {count - len(history)} same-day duplicate records"
            + (f" in {source}" if source else "")
        )
    logger.debug(f"Parsed {len(history)} run records")
    return history


def _read_json_rows(path: Path) -> List[Dict[str, Any]]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise HistoryFormatError(f"Invalid JSON: {e.msg}", source=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise HistoryFormatError(f"Cannot read history file: {e}", source=str(path)) from e

    if isinstance(payload, dict):
        payload = payload.get("runs")
    if not isinstance(payload, list):
        raise HistoryFormatError(
            "Expected a list of runs or an object with a 'runs' list",
            source=str(path),
        )
    return payload


def _read_csv_rows(path: Path) -> List[Dict[str, Any]]:
    try:
        with path.open(newline="", encoding="utf-8") as f:
            return list(csv.DictReader(f))
    except csv.Error as e:
        raise HistoryFormatError(f"Invalid CSV: {e}", source=str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise HistoryFormatError(f"Cannot read history file: {e}", source=str(path)) from e


def load_history(
    path: Union[str, Path],
    lactate_threshold_hr: float = DEFAULT_LACTATE_THRESHOLD_HR,
) -> RunHistory:
    """
    Load run history from a .json or .csv file.

    Args:
        path: History file path
        lactate_threshold_hr: Threshold HR used when TSS must be derived

    Returns:
        RunHistory

    Raises:
        HistoryNotFoundError: If the file does not exist
        HistoryFormatError: If the file type is unsupported or content is invalid
    """
    path = Path(path)
    if not path.is_file():
        raise HistoryNotFoundError(str(path))

    suffix = path.suffix.lower()
    if suffix == ".json":
        rows = _read_json_rows(path)
    elif suffix == ".csv":
        rows = _read_csv_rows(path)
    else:
        raise HistoryFormatError(
            f"Unsupported history file type: {suffix or '(none)'}",
            source=str(path),
        )

    logger.info(f"Loading {len(rows)} run records from {path}")
    return parse_history(rows, lactate_threshold_hr=lactate_threshold_hr, source=str(path))


def dump_assessment(assessment: LoadAssessment) -> str:
    """Render an assessment as JSON."""
    return json.dumps(assessment.to_dict(), indent=2)
