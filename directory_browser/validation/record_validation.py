from __future__ import annotations

from typing import Any, List

import pandas as pd

from directory_browser.core.record import CORE_FIELDS, Record
from directory_browser.validation.errors import ValidationIssue, ValidationError

# Cap per-column issues so one bad export doesn't produce a wall of errors
MAX_ISSUES_PER_COLUMN = 10


def validate_records_payload(payload: Any) -> pd.DataFrame:
    """
    Validate the decoded JSON payload BEFORE any Record is built.

    The payload must be an array of objects, each carrying string `name`,
    `location` and `industry`. Empty strings are allowed. Extra keys are fine.

    :return: the payload as a DataFrame (one row per record).
    :raises ValidationError: listing every problem found.
    """
    if not isinstance(payload, list):
        raise ValidationError([ValidationIssue("PAYLOAD_TYPE", "Record payload must be a JSON array.")])

    issues: list[ValidationIssue] = []
    for i, item in enumerate(payload):
        if not isinstance(item, dict):
            issues.append(ValidationIssue("RECORD_TYPE", f"records[{i}] must be an object.", row=i))
    if issues:
        raise ValidationError(issues)

    frame = pd.DataFrame(payload)
    if not payload:
        return frame

    for column in CORE_FIELDS:
        if column not in frame.columns:
            issues.append(ValidationIssue("MISSING_FIELD", f"No record has a '{column}' field."))
            continue

        is_str = frame[column].map(lambda v: isinstance(v, str))
        bad_rows = frame.index[~is_str.to_numpy(dtype=bool)]
        for row in bad_rows[:MAX_ISSUES_PER_COLUMN]:
            issues.append(
                ValidationIssue(
                    "FIELD_TYPE",
                    f"records[{row}].{column} must be a string.",
                    row=int(row),
                )
            )
        if len(bad_rows) > MAX_ISSUES_PER_COLUMN:
            issues.append(
                ValidationIssue(
                    "FIELD_TYPE",
                    f"{len(bad_rows) - MAX_ISSUES_PER_COLUMN} more records have a non-string '{column}'.",
                )
            )

    if issues:
        raise ValidationError(issues)

    return frame


def records_from_payload(payload: Any) -> List[Record]:
    """
    Validate `payload` and build one Record per row of the validated frame.

    Core fields come from the frame. Extra keys are taken from the original
    objects, since the frame fills keys a row lacks with NaN and upcasts ints.
    """
    frame = validate_records_payload(payload)
    if frame.empty:
        return []

    core = frame.loc[:, list(CORE_FIELDS)].itertuples(index=False, name=None)
    return [
        Record(
            name=name,
            location=location,
            industry=industry,
            extra={k: v for k, v in item.items() if k not in CORE_FIELDS},
        )
        for (name, location, industry), item in zip(core, payload)
    ]
