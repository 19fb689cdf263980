"""Request and response models for the TofuPilot v2 API."""

from tofupilot.models.attachments import DeleteAttachmentResponse, InitializeUploadRequest, UploadSession
from tofupilot.models.batches import Batch, CreateBatchRequest, UpdateBatchRequest
from tofupilot.models.common import DeleteResponse, PaginatedResponse, PaginationMeta
from tofupilot.models.enums import LogLevel, MeasurementOutcome, PhaseOutcome, RunOutcome
from tofupilot.models.parts import (
    CreatePartRequest,
    CreatePartRevisionRequest,
    Part,
    PartRevision,
    UpdatePartRequest,
    UpdatePartRevisionRequest,
)
from tofupilot.models.procedures import (
    CreateProcedureRequest,
    CreateProcedureVersionRequest,
    Procedure,
    ProcedureVersion,
    UpdateProcedureRequest,
)
from tofupilot.models.runs import (
    CreateRunLog,
    CreateRunMeasurement,
    CreateRunPhase,
    CreateRunRequest,
    Run,
    RunAttachment,
    RunLog,
    RunMeasurement,
    RunPhase,
    UpdateRunRequest,
)
from tofupilot.models.stations import CreateStationRequest, LinkProcedureRequest, Station, UpdateStationRequest
from tofupilot.models.units import CreateUnitRequest, Unit, UpdateUnitRequest

__all__ = [
    "Batch",
    "CreateBatchRequest",
    "CreatePartRequest",
    "CreatePartRevisionRequest",
    "CreateProcedureRequest",
    "CreateProcedureVersionRequest",
    "CreateRunLog",
    "CreateRunMeasurement",
    "CreateRunPhase",
    "CreateRunRequest",
    "CreateStationRequest",
    "CreateUnitRequest",
    "DeleteAttachmentResponse",
    "DeleteResponse",
    "InitializeUploadRequest",
    "LinkProcedureRequest",
    "LogLevel",
    "MeasurementOutcome",
    "PaginatedResponse",
    "PaginationMeta",
    "Part",
    "PartRevision",
    "PhaseOutcome",
    "Procedure",
    "ProcedureVersion",
    "Run",
    "RunAttachment",
    "RunLog",
    "RunMeasurement",
    "RunOutcome",
    "RunPhase",
    "Station",
    "Unit",
    "UpdateBatchRequest",
    "UpdatePartRequest",
    "UpdatePartRevisionRequest",
    "UpdateProcedureRequest",
    "UpdateRunRequest",
    "UpdateStationRequest",
    "UpdateUnitRequest",
    "UploadSession",
]
