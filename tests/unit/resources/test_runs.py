"""Tests for the runs resource."""

import json
from datetime import UTC, datetime

import httpx
import pytest

from tofupilot.config import TofuPilotOptions
from tofupilot.errors.exceptions import DeserializationError, NotFoundError, TooManyAttachmentsError
from tofupilot.http_client import TofuPilotHttpClient
from tofupilot.models import CreateRunRequest, Run, RunOutcome, UpdateRunRequest
from tofupilot.resources import RunsResource
from tofupilot.testing import RecordingHandler, error_response, json_response

STARTED = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def _runs(handler) -> RunsResource:
    http = TofuPilotHttpClient(TofuPilotOptions(api_key="tp-key"), transport=handler.transport())
    return RunsResource(http)


class TestRunsCrud:
    """Test run endpoints."""

    @pytest.mark.unit
    async def test_list_defaults(self):
        handler = RecordingHandler(json_response(200, {"data": [{"id": "run-1"}], "meta": {"hasMore": False}}))

        page = await _runs(handler).list()

        assert [run.id for run in page.data] == ["run-1"]
        assert page.has_more is False
        request = handler.last_request
        assert request.url.path == "/v2/runs"
        assert dict(request.url.params) == {"limit": "50", "sortBy": "started_at", "sortOrder": "desc"}

    @pytest.mark.unit
    async def test_list_filters(self):
        handler = RecordingHandler(json_response(200, {"data": []}))

        await _runs(handler).list(
            outcomes=[RunOutcome.PASS, RunOutcome.FAIL],
            serial_numbers=["SN-1", "SN-2"],
            started_after=STARTED,
            cursor=100,
            limit=None,
        )

        params = handler.last_request.url.params
        assert params.get_list("outcomes") == ["PASS", "FAIL"]
        assert params.get_list("serialNumbers") == ["SN-1", "SN-2"]
        assert params["startedAfter"] == "2024-05-01T12:00:00.000Z"
        assert params["cursor"] == "100"
        assert "limit" not in params

    @pytest.mark.unit
    async def test_next_cursor_sent_back_unchanged(self):
        handler = RecordingHandler(
            [
                json_response(200, {"data": [{"id": "run-1"}], "meta": {"hasMore": True, "nextCursor": 50}}),
                json_response(200, {"data": [{"id": "run-2"}], "meta": {"hasMore": False}}),
            ]
        )
        runs = _runs(handler)

        first = await runs.list()
        second = await runs.list(cursor=first.next_cursor)

        assert handler.requests[1].url.params["cursor"] == "50"
        assert [run.id for run in second.data] == ["run-2"]
        assert second.next_cursor is None

    @pytest.mark.unit
    async def test_create(self):
        handler = RecordingHandler(json_response(200, {"id": "run-1"}))

        run = await _runs(handler).create(
            CreateRunRequest(
                outcome=RunOutcome.PASS,
                procedure_id="proc-1",
                started_at=STARTED,
                ended_at=STARTED,
                serial_number="SN-1",
            )
        )

        assert isinstance(run, Run)
        assert run.id == "run-1"
        request = handler.last_request
        assert (request.method, request.url.path) == ("POST", "/v2/runs")
        assert json.loads(request.content) == {
            "outcome": "PASS",
            "procedureId": "proc-1",
            "startedAt": "2024-05-01T12:00:00.000Z",
            "endedAt": "2024-05-01T12:00:00.000Z",
            "serialNumber": "SN-1",
        }

    @pytest.mark.unit
    async def test_get_update(self):
        handler = RecordingHandler(json_response(200, {"id": "run-1"}))
        runs = _runs(handler)

        await runs.get("run-1")
        await runs.update("run-1", UpdateRunRequest(attachments=["up-1"]))

        get, patch = handler.requests
        assert (get.method, get.url.path) == ("GET", "/v2/runs/run-1")
        assert (patch.method, patch.url.path) == ("PATCH", "/v2/runs/run-1")
        assert json.loads(patch.content) == {"attachments": ["up-1"]}

    @pytest.mark.unit
    async def test_delete_by_ids(self):
        handler = RecordingHandler(json_response(200, {"ids": ["run-1", "run-2"]}))

        deleted = await _runs(handler).delete(["run-1", "run-2"])

        assert deleted.ids == ["run-1", "run-2"]
        request = handler.last_request
        assert request.method == "DELETE"
        assert request.url.params.get_list("ids") == ["run-1", "run-2"]

    @pytest.mark.unit
    async def test_get_missing(self):
        handler = RecordingHandler(error_response(404, "Run not found"))

        with pytest.raises(NotFoundError, match="Run not found"):
            await _runs(handler).get("missing")


class TestRunsAttach:
    """Test attaching files to a run."""

    @staticmethod
    def _api():
        counter = 0

        def respond(request: httpx.Request) -> httpx.Response:
            nonlocal counter
            if request.url.path == "/v2/attachments/initialize":
                counter += 1
                return json_response(200, {"id": f"up-{counter}", "uploadUrl": f"https://storage.example.com/{counter}"})
            if request.method == "PUT":
                return httpx.Response(200)
            return json_response(200, {"id": "run-1"})

        return RecordingHandler(respond)

    @pytest.mark.unit
    async def test_attach_links_each_upload(self, tmp_path):
        first = tmp_path / "a.txt"
        second = tmp_path / "b.csv"
        first.write_text("a")
        second.write_text("b,c")
        handler = self._api()

        upload_ids = await _runs(handler).attach("run-1", [first, second])

        assert upload_ids == ["up-1", "up-2"]
        sequence = [(r.method, r.url.path) for r in handler.requests]
        assert sequence == [
            ("POST", "/v2/attachments/initialize"),
            ("PUT", "/1"),
            ("PATCH", "/v2/runs/run-1"),
            ("POST", "/v2/attachments/initialize"),
            ("PUT", "/2"),
            ("PATCH", "/v2/runs/run-1"),
        ]
        assert json.loads(handler.requests[2].content) == {"attachments": ["up-1"]}
        assert json.loads(handler.requests[5].content) == {"attachments": ["up-2"]}

    @pytest.mark.unit
    async def test_attach_too_many(self, tmp_path):
        paths = []
        for i in range(25):
            path = tmp_path / f"{i}.txt"
            path.write_text("x")
            paths.append(path)
        handler = self._api()

        with pytest.raises(TooManyAttachmentsError):
            await _runs(handler).attach("run-1", paths)

        assert handler.call_count == 0

    @pytest.mark.unit
    async def test_attach_rejects_session_without_id(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("a")
        handler = RecordingHandler(json_response(200, {"id": None, "uploadUrl": "https://storage.example.com/1"}))

        with pytest.raises(DeserializationError):
            await _runs(handler).attach("run-1", [path])

        assert [(r.method, r.url.path) for r in handler.requests] == [("POST", "/v2/attachments/initialize")]
