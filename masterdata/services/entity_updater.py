"""Partial updates through the database-side ``updateentity`` procedure.

The procedure archives the live version of a record, applies the patch in
place and answers with a JSON object tagged by an HTTP-like status::

    {"status": 200, "message": {...updated row...}}
    {"status": 400, "message": "Unknown column: foo"}
"""

import json
import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from masterdata.config import settings
from masterdata.database import get_db_context
from masterdata.schemas.common import ServiceResult

logger = logging.getLogger(__name__)

UNEXPECTED_RESPONSE = "Unexpected response from updateEntity"

UPDATE_ENTITY_SQL = text(
    "SELECT updateentity("
    ":db_schema, :table_name, CAST(:update_data AS jsonb), CAST(:criteria AS jsonb), "
    ":request_id, :username"
    ") AS response"
)


def decode_update_response(payload: Any) -> ServiceResult:
    """Turn the procedure's tagged payload into a service result."""
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError:
            return ServiceResult(500, UNEXPECTED_RESPONSE)

    if not isinstance(payload, dict):
        return ServiceResult(500, UNEXPECTED_RESPONSE)
    status = payload.get("status")
    if not isinstance(status, int) or isinstance(status, bool):
        return ServiceResult(500, UNEXPECTED_RESPONSE)

    message = payload.get("message")
    if status in (400, 500):
        return ServiceResult(status, str(message))

    # The updated row may arrive JSON-encoded a second time
    if isinstance(message, str):
        message = json.loads(message)
    return ServiceResult(status, message)


class EntityUpdater:
    """Applies partial updates to a single live record via ``updateentity``."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        db_schema: str | None = None,
    ):
        self._session_factory = session_factory
        self._db_schema = db_schema or settings.db_schema

    async def apply_patch(
        self,
        table_name: str,
        patch: dict[str, Any],
        key_criteria: dict[str, Any],
        actor: str,
    ) -> ServiceResult:
        """Patch the row of ``table_name`` matching ``key_criteria``.

        Any database error is reported as a 500 result carrying its message.
        """
        params = {
            "db_schema": self._db_schema,
            "table_name": table_name,
            "update_data": json.dumps(patch, default=str),
            "criteria": json.dumps(key_criteria, default=str),
            "request_id": actor,
            "username": actor,
        }
        logger.debug(f"updateentity {table_name}: patch={patch} criteria={key_criteria}")
        try:
            async with get_db_context(self._session_factory) as session:
                result = await session.execute(UPDATE_ENTITY_SQL, params)
                payload = result.scalar_one_or_none()
            return decode_update_response(payload)
        except Exception as exc:
            logger.error(f"updateentity {table_name} failed: {exc}")
            return ServiceResult(500, str(exc))
