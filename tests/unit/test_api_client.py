"""Unit tests for the collaborator HTTP client."""

from unittest.mock import MagicMock

import pytest
import requests

from contract_wizard.clients import CollaboratorError, ContractApiClient
from contract_wizard.models.compensation import CompensationConfig


def _response(status_code=200, body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return ContractApiClient(base_url="http://api.test/api/", timeout=5, session=session)


class TestTransport:
    """Tests for request handling and error mapping."""

    def test_request_shape(self, client, session):
        session.request.return_value = _response(body={"draft": {"id": "d-1"}})

        draft = client.save_draft({"title": "T"})

        assert draft == {"id": "d-1"}
        session.request.assert_called_once_with(
            "POST",
            "http://api.test/api/drafts",
            json={"title": "T"},
            params=None,
            timeout=5,
            headers={"Content-Type": "application/json"},
        )

    def test_http_error(self, client, session):
        session.request.return_value = _response(500, {"error": "boom"})

        with pytest.raises(CollaboratorError) as exc_info:
            client.list_templates()

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "boom"
        assert exc_info.value.endpoint == "/templates"

    def test_connection_error(self, client, session):
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(CollaboratorError) as exc_info:
            client.list_clients()

        assert exc_info.value.status_code is None

    def test_timeout(self, client, session):
        session.request.side_effect = requests.Timeout("slow")

        with pytest.raises(CollaboratorError, match="timed out"):
            client.list_clients()

    def test_invalid_json(self, client, session):
        session.request.return_value = _response(200, ValueError("bad json"))

        with pytest.raises(CollaboratorError, match="Invalid JSON"):
            client.list_clients()

    def test_non_object_body(self, client, session):
        session.request.return_value = _response(200, ["a"])

        with pytest.raises(CollaboratorError):
            client.list_clients()

    def test_error_to_dict(self):
        error = CollaboratorError("nope", status_code=404, endpoint="/drafts/x")

        assert error.is_not_found
        assert error.to_dict()["error_type"] == "CollaboratorError"
        assert "Status: 404" in str(error)


class TestDraftsAndRecords:
    def test_get_draft_not_found(self, client, session):
        session.request.return_value = _response(404, {"error": "Draft not found"})

        assert client.get_draft("missing") is None

    def test_delete_draft_uses_query_param(self, client, session):
        session.request.return_value = _response(body={"success": True})

        client.delete_draft("d-1")

        args, kwargs = session.request.call_args
        assert args == ("DELETE", "http://api.test/api/drafts")
        assert kwargs["params"] == {"id": "d-1"}

    def test_templates_parsed(self, client, session):
        session.request.return_value = _response(body={"templates": [
            {"id": "t1", "name": "NDA", "content": "{{a}}", "fields": [{"id": "a", "label": "A"}]},
        ]})

        templates = client.list_templates()

        assert templates[0].name == "NDA"
        assert templates[0].fields[0].id == "a"

    def test_default_templates_failure(self, client, session):
        session.request.return_value = _response(body={"success": False, "message": "no seed"})

        with pytest.raises(CollaboratorError, match="no seed"):
            client.get_default_templates()

    def test_get_client(self, client, session):
        session.request.return_value = _response(body={"client": {"id": "c", "name": "Acme", "email": "a@b"}})

        assert client.get_client("c").email == "a@b"


class TestAI:
    def test_generate_contract(self, client, session):
        session.request.return_value = _response(body={
            "success": True, "contract": {"title": "Web Design", "content": "Body"},
        })

        result = client.generate_contract("a website", contract_type="design")

        assert result.success
        assert result.title == "Web Design"
        assert session.request.call_args.kwargs["json"] == {
            "description": "a website", "contractType": "design",
        }

    def test_generate_needs_more_info(self, client, session):
        session.request.return_value = _response(body={"needsMoreInfo": True, "questions": ["Budget?"]})

        result = client.generate_contract("something")

        assert result.needs_more_info
        assert not result.success
        assert result.questions == ["Budget?"]

    def test_edit_contract(self, client, session):
        session.request.return_value = _response(body={
            "success": True, "modifiedContent": "New", "message": "Done",
        })

        result = client.edit_contract("Old", "make it new")

        assert result.modified_content == "New"
        assert session.request.call_args.kwargs["json"]["conversationHistory"] == []

    def test_fix_contract(self, client, session):
        session.request.return_value = _response(body={"success": True, "fixedContent": "Fixed"})
        compensation = CompensationConfig(has_compensation=True)

        assert client.fix_contract("Broken", compensation) == "Fixed"
        sent = session.request.call_args.kwargs["json"]
        assert sent["compensationData"]["hasCompensation"] is True

    def test_fix_contract_failure(self, client, session):
        session.request.return_value = _response(body={"success": False, "error": "quota"})

        with pytest.raises(CollaboratorError, match="quota"):
            client.fix_contract("Broken")
