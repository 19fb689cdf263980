"""Run models."""

from typing import Any

from tofupilot.models.enums import LogLevel, MeasurementOutcome, PhaseOutcome, RunOutcome
from tofupilot.serialization import ApiModel, Timestamp


class RunMeasurement(ApiModel):
    name: str
    outcome: MeasurementOutcome | None = None
    measured_value: Any = None
    units: str | None = None
    lower_limit: float | None = None
    upper_limit: float | None = None
    validators: list[str] | None = None
    docstring: str | None = None


class RunPhase(ApiModel):
    name: str
    outcome: PhaseOutcome | None = None
    start_time_millis: int | None = None
    end_time_millis: int | None = None
    measurements: list[RunMeasurement] | None = None
    docstring: str | None = None


class RunLog(ApiModel):
    level: LogLevel | None = None
    timestamp: str | None = None
    message: str | None = None
    source_file: str | None = None
    line_number: int | None = None


class RunAttachment(ApiModel):
    id: str | None = None
    file_name: str | None = None
    url: str | None = None
    content_type: str | None = None


class Run(ApiModel):
    id: str
    outcome: RunOutcome | None = None
    procedure_id: str | None = None
    procedure_name: str | None = None
    procedure_version: str | None = None
    serial_number: str | None = None
    part_number: str | None = None
    revision_number: str | None = None
    batch_number: str | None = None
    started_at: Timestamp | None = None
    ended_at: Timestamp | None = None
    created_at: Timestamp | None = None
    # ISO 8601 duration, e.g. "PT1M30S"
    duration: str | None = None
    url: str | None = None
    phases: list[RunPhase] | None = None
    logs: list[RunLog] | None = None
    attachments: list[RunAttachment] | None = None
    docstring: str | None = None
    operated_by: str | None = None


class CreateRunMeasurement(ApiModel):
    name: str
    outcome: MeasurementOutcome
    measured_value: Any = None
    units: str | None = None
    lower_limit: float | None = None
    upper_limit: float | None = None
    validators: list[str] | None = None
    docstring: str | None = None


class CreateRunPhase(ApiModel):
    name: str
    outcome: PhaseOutcome
    start_time_millis: int
    end_time_millis: int
    measurements: list[CreateRunMeasurement] | None = None
    docstring: str | None = None


class CreateRunLog(ApiModel):
    level: LogLevel
    timestamp: str
    message: str
    source_file: str | None = None
    line_number: int | None = None


class CreateRunRequest(ApiModel):
    outcome: RunOutcome
    procedure_id: str
    started_at: Timestamp
    ended_at: Timestamp
    serial_number: str
    procedure_version: str | None = None
    operated_by: str | None = None
    part_number: str | None = None
    revision_number: str | None = None
    batch_number: str | None = None
    sub_units: list[str] | None = None
    docstring: str | None = None
    phases: list[CreateRunPhase] | None = None
    logs: list[CreateRunLog] | None = None


class UpdateRunRequest(ApiModel):
    # Upload ids to link to the run
    attachments: list[str] | None = None
