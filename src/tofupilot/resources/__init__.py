"""Resource bindings for the TofuPilot v2 API."""

from tofupilot.resources.attachments import AttachmentsResource
from tofupilot.resources.base import ResourceBase
from tofupilot.resources.batches import BatchesResource
from tofupilot.resources.parts import PartRevisionsResource, PartsResource
from tofupilot.resources.procedures import ProcedureVersionsResource, ProceduresResource
from tofupilot.resources.runs import RunsResource
from tofupilot.resources.stations import StationsResource
from tofupilot.resources.units import UnitsResource

__all__ = [
    "AttachmentsResource",
    "BatchesResource",
    "PartRevisionsResource",
    "PartsResource",
    "ProcedureVersionsResource",
    "ProceduresResource",
    "ResourceBase",
    "RunsResource",
    "StationsResource",
    "UnitsResource",
]
