"""Tests for the unit, part, procedure, batch, station and attachment resources."""

import json

import pytest

from tofupilot.config import TofuPilotOptions
from tofupilot.http_client import TofuPilotHttpClient
from tofupilot.models import (
    Batch,
    CreateBatchRequest,
    CreatePartRequest,
    CreatePartRevisionRequest,
    CreateProcedureRequest,
    CreateProcedureVersionRequest,
    CreateStationRequest,
    CreateUnitRequest,
    InitializeUploadRequest,
    Part,
    PartRevision,
    Procedure,
    ProcedureVersion,
    Station,
    Unit,
    UpdateBatchRequest,
    UpdatePartRequest,
    UpdatePartRevisionRequest,
    UpdateProcedureRequest,
    UpdateStationRequest,
    UpdateUnitRequest,
)
from tofupilot.resources import (
    AttachmentsResource,
    BatchesResource,
    PartsResource,
    ProceduresResource,
    StationsResource,
    UnitsResource,
)
from tofupilot.testing import RecordingHandler, json_response


def _http(handler) -> TofuPilotHttpClient:
    return TofuPilotHttpClient(TofuPilotOptions(api_key="tp-key"), transport=handler.transport())


def _calls(handler):
    return [(r.method, r.url.path) for r in handler.requests]


class TestUnits:
    """Test unit endpoints."""

    @pytest.mark.unit
    async def test_crud(self):
        handler = RecordingHandler(json_response(200, {"id": "u-1"}))
        units = UnitsResource(_http(handler))

        unit = await units.create(CreateUnitRequest(serial_number="SN-1", part_number="PCB-1"))
        await units.get("u-1")
        await units.update("u-1", UpdateUnitRequest(batch_number="B-7"))
        await units.delete("u-1")

        assert isinstance(unit, Unit)
        assert _calls(handler) == [
            ("POST", "/v2/units"),
            ("GET", "/v2/units/u-1"),
            ("PATCH", "/v2/units/u-1"),
            ("DELETE", "/v2/units/u-1"),
        ]
        assert json.loads(handler.requests[0].content) == {"serialNumber": "SN-1", "partNumber": "PCB-1"}
        assert json.loads(handler.requests[2].content) == {"batchNumber": "B-7"}

    @pytest.mark.unit
    async def test_list_filters(self):
        handler = RecordingHandler(json_response(200, {"data": [{"id": "u-1"}]}))

        page = await UnitsResource(_http(handler)).list(serial_numbers=["SN-1"], part_numbers=["PCB-1"])

        assert isinstance(page.data[0], Unit)
        params = handler.last_request.url.params
        assert params.get_list("serialNumbers") == ["SN-1"]
        assert params.get_list("partNumbers") == ["PCB-1"]
        assert params["limit"] == "50"

    @pytest.mark.unit
    async def test_children(self):
        handler = RecordingHandler(json_response(200, {"id": "u-1"}))
        units = UnitsResource(_http(handler))

        await units.add_child("u-1", "u-2")
        await units.remove_child("u-1", "u-2")

        assert _calls(handler) == [
            ("POST", "/v2/units/u-1/children/u-2"),
            ("DELETE", "/v2/units/u-1/children/u-2"),
        ]
        assert json.loads(handler.requests[0].content) == {}


class TestParts:
    """Test part and revision endpoints."""

    @pytest.mark.unit
    async def test_crud(self):
        handler = RecordingHandler(json_response(200, {"id": "p-1"}))
        parts = PartsResource(_http(handler))

        part = await parts.create(CreatePartRequest(part_number="PCB-1", name="Board"))
        await parts.get("p-1")
        await parts.update("p-1", UpdatePartRequest(name="Main board"))
        await parts.list(search_query="board")

        assert isinstance(part, Part)
        assert _calls(handler) == [
            ("POST", "/v2/parts"),
            ("GET", "/v2/parts/p-1"),
            ("PATCH", "/v2/parts/p-1"),
            ("GET", "/v2/parts"),
        ]
        assert handler.last_request.url.params["searchQuery"] == "board"

    @pytest.mark.unit
    async def test_revisions(self):
        handler = RecordingHandler(json_response(200, {"id": "r-1"}))
        revisions = PartsResource(_http(handler)).revisions

        revision = await revisions.create("p-1", CreatePartRevisionRequest(revision_number="B"))
        await revisions.get("p-1", "r-1")
        await revisions.update("p-1", "r-1", UpdatePartRevisionRequest(revision_number="C"))
        await revisions.delete("p-1", "r-1")

        assert isinstance(revision, PartRevision)
        assert _calls(handler) == [
            ("POST", "/v2/parts/p-1/revisions"),
            ("GET", "/v2/parts/p-1/revisions/r-1"),
            ("PATCH", "/v2/parts/p-1/revisions/r-1"),
            ("DELETE", "/v2/parts/p-1/revisions/r-1"),
        ]


class TestProcedures:
    """Test procedure and version endpoints."""

    @pytest.mark.unit
    async def test_crud(self):
        handler = RecordingHandler(json_response(200, {"id": "proc-1"}))
        procedures = ProceduresResource(_http(handler))

        procedure = await procedures.create(CreateProcedureRequest(name="EOL test"))
        await procedures.get("proc-1")
        await procedures.update("proc-1", UpdateProcedureRequest(name="EOL"))
        await procedures.delete("proc-1")

        assert isinstance(procedure, Procedure)
        assert _calls(handler) == [
            ("POST", "/v2/procedures"),
            ("GET", "/v2/procedures/proc-1"),
            ("PATCH", "/v2/procedures/proc-1"),
            ("DELETE", "/v2/procedures/proc-1"),
        ]

    @pytest.mark.unit
    async def test_versions(self):
        handler = RecordingHandler(json_response(200, {"id": "v-1"}))
        versions = ProceduresResource(_http(handler)).versions

        version = await versions.create("proc-1", CreateProcedureVersionRequest(version="1.2.0"))
        await versions.get("proc-1", "v-1")
        await versions.delete("proc-1", "v-1")

        assert isinstance(version, ProcedureVersion)
        assert json.loads(handler.requests[0].content) == {"version": "1.2.0"}
        assert _calls(handler) == [
            ("POST", "/v2/procedures/proc-1/versions"),
            ("GET", "/v2/procedures/proc-1/versions/v-1"),
            ("DELETE", "/v2/procedures/proc-1/versions/v-1"),
        ]


class TestBatches:
    """Test batch endpoints."""

    @pytest.mark.unit
    async def test_crud(self):
        handler = RecordingHandler(json_response(200, {"id": "b-1"}))
        batches = BatchesResource(_http(handler))

        batch = await batches.create(CreateBatchRequest(batch_number="B-7", part_number="PCB-1"))
        await batches.get("b-1")
        await batches.update("b-1", UpdateBatchRequest(batch_number="B-8"))
        await batches.delete("b-1")

        assert isinstance(batch, Batch)
        assert json.loads(handler.requests[0].content) == {"batchNumber": "B-7", "partNumber": "PCB-1"}
        assert _calls(handler) == [
            ("POST", "/v2/batches"),
            ("GET", "/v2/batches/b-1"),
            ("PATCH", "/v2/batches/b-1"),
            ("DELETE", "/v2/batches/b-1"),
        ]


class TestStations:
    """Test station endpoints."""

    @pytest.mark.unit
    async def test_crud_and_procedure_links(self):
        handler = RecordingHandler(json_response(200, {"id": "st-1"}))
        stations = StationsResource(_http(handler))

        station = await stations.create(CreateStationRequest(name="Line 1"))
        await stations.update("st-1", UpdateStationRequest(name="Line 2"))
        await stations.link_procedure("st-1", "proc-1")
        await stations.unlink_procedure("st-1", "proc-1")
        await stations.remove("st-1")

        assert isinstance(station, Station)
        assert _calls(handler) == [
            ("POST", "/v2/stations"),
            ("PATCH", "/v2/stations/st-1"),
            ("POST", "/v2/stations/st-1/procedures"),
            ("DELETE", "/v2/stations/st-1/procedures/proc-1"),
            ("DELETE", "/v2/stations/st-1"),
        ]
        assert json.loads(handler.requests[2].content) == {"procedureId": "proc-1"}


class TestAttachments:
    """Test attachment endpoints."""

    @pytest.mark.unit
    async def test_initialize_and_delete(self):
        handler = RecordingHandler(
            [
                json_response(200, {"id": "up-1", "uploadUrl": "https://storage.example.com/1"}),
                json_response(200, {"success": True}),
            ]
        )
        attachments = AttachmentsResource(_http(handler))

        session = await attachments.initialize(InitializeUploadRequest(name="a.txt"))
        deleted = await attachments.delete("up-1")

        assert session.upload_id == "up-1"
        assert deleted.success is True
        assert _calls(handler) == [
            ("POST", "/v2/attachments/initialize"),
            ("DELETE", "/v2/attachments/up-1"),
        ]

    @pytest.mark.unit
    async def test_upload(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("hello")
        handler = RecordingHandler(
            [
                json_response(200, {"id": "up-1", "uploadUrl": "https://storage.example.com/1"}),
                json_response(200, {}),
            ]
        )

        session = await AttachmentsResource(_http(handler)).upload(path)

        assert session.upload_id == "up-1"
        assert _calls(handler) == [("POST", "/v2/attachments/initialize"), ("PUT", "/1")]
        assert handler.requests[1].content == b"hello"
