"""Tests for the ``updateentity`` result decoding and call marshalling."""

import json

import pytest

from masterdata.services.entity_updater import (
    UNEXPECTED_RESPONSE,
    EntityUpdater,
    decode_update_response,
)


class FakeResult:
    def __init__(self, payload):
        self.payload = payload

    def scalar_one_or_none(self):
        return self.payload


class FakeSession:
    """Minimal async session recording what the updater sends."""

    def __init__(self, payload=None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.statements = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def execute(self, statement, params=None):
        if self.error is not None:
            raise self.error
        self.statements.append((statement, params))
        return FakeResult(self.payload)

    async def commit(self):
        self.committed = True

    async def rollback(self):
        self.rolled_back = True

    async def close(self):
        self.closed = True


class TestDecodeUpdateResponse:
    def test_error_tag_surfaces_message(self):
        result = decode_update_response({"status": 400, "message": "bad"})

        assert (result.status, result.data) == (400, "bad")

    def test_server_error_tag(self):
        result = decode_update_response(
            {"status": 500, "message": "Record not found for the given criteria"}
        )

        assert result.status == 500
        assert result.data == "Record not found for the given criteria"

    def test_success_returns_row(self):
        row = {"listId": "abc", "name": "Veggies", "recSeq": 0}

        result = decode_update_response({"status": 200, "message": row})

        assert (result.status, result.data) == (200, row)

    def test_success_row_encoded_as_string(self):
        row = {"listId": "abc", "name": "Veggies"}

        result = decode_update_response({"status": 200, "message": json.dumps(row)})

        assert result.data == row

    def test_whole_response_encoded_as_string(self):
        payload = json.dumps({"status": 200, "message": json.dumps({"name": "Veggies"})})

        result = decode_update_response(payload)

        assert (result.status, result.data) == (200, {"name": "Veggies"})

    @pytest.mark.parametrize(
        "payload",
        [None, {}, {"message": "x"}, {"status": "200", "message": {}}, ["status", 200], "not json"],
    )
    def test_untagged_response_is_internal_error(self, payload):
        result = decode_update_response(payload)

        assert (result.status, result.data) == (500, UNEXPECTED_RESPONSE)


class TestApplyPatch:
    @pytest.mark.asyncio
    async def test_marshals_call_and_commits(self):
        session = FakeSession({"status": 200, "message": {"listId": "abc", "name": "Veggies"}})
        updater = EntityUpdater(lambda: session, db_schema="public")

        result = await updater.apply_patch(
            "Lists", {"name": "Veggies", "modifiedBy": "actor"}, {"listId": "abc"}, "actor"
        )

        assert result.status == 200
        assert result.data == {"listId": "abc", "name": "Veggies"}
        assert session.committed
        assert session.closed

        statement, params = session.statements[0]
        assert "updateentity" in str(statement)
        assert params["db_schema"] == "public"
        assert params["table_name"] == "Lists"
        assert json.loads(params["update_data"]) == {"name": "Veggies", "modifiedBy": "actor"}
        assert json.loads(params["criteria"]) == {"listId": "abc"}
        assert params["request_id"] == params["username"] == "actor"

    @pytest.mark.asyncio
    async def test_procedure_error_is_passed_through(self):
        session = FakeSession({"status": 400, "message": "Unknown column: colour"})
        updater = EntityUpdater(lambda: session, db_schema="public")

        result = await updater.apply_patch("Lists", {"colour": "red"}, {"listId": "abc"}, "actor")

        assert (result.status, result.data) == (400, "Unknown column: colour")

    @pytest.mark.asyncio
    async def test_database_exception_becomes_internal_error(self):
        session = FakeSession(error=RuntimeError("connection reset"))
        updater = EntityUpdater(lambda: session, db_schema="public")

        result = await updater.apply_patch("Lists", {"name": "x"}, {"listId": "abc"}, "actor")

        assert (result.status, result.data) == (500, "connection reset")
        assert not session.committed
        assert session.rolled_back
