"""SQLAlchemy-backed repository for stored client records."""

import json

from sqlalchemy import text

from fincalc.application.ports.client_repository import (
    ClientListing,
    ClientRepositoryPort,
)
from fincalc.application.ports.database import DatabaseEnginePort
from fincalc.domain.models.client import ClientRecord
from fincalc.infrastructure.logging.logger import get_app_logger


class SqlAlchemyClientRepository(ClientRepositoryPort):
    """Repository reading the ``clients`` table.

    Each row carries the contact columns plus the client form as JSON text
    in ``data``. Contact columns take precedence over the JSON copy.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the client engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_client(self, client_id: str) -> ClientRecord | None:
        """Return the client record for an id, or None when absent."""
        query = text(
            """
            SELECT id, first_name, last_name, email, data
            FROM clients
            WHERE id = :client_id
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"client_id": client_id}).first()
        if row is None:
            return None

        data = self._decode_data(row.id, row.data)
        data["id"] = str(row.id)
        for column, key in (
            ("first_name", "firstName"),
            ("last_name", "lastName"),
            ("email", "email"),
        ):
            value = getattr(row, column)
            if value:
                data[key] = value
        return ClientRecord.from_mapping(data)

    def list_clients(self) -> list[ClientListing]:
        """Return every stored client ordered by name."""
        query = text(
            """
            SELECT id, first_name, last_name, email
            FROM clients
            ORDER BY last_name, first_name
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            ClientListing(
                id=str(row.id),
                first_name=row.first_name or "",
                last_name=row.last_name or "",
                email=row.email or "",
            )
            for row in rows
        ]

    def _decode_data(self, client_id, raw) -> dict:
        if raw is None or raw == "":
            return {}
        if isinstance(raw, dict):
            return dict(raw)
        try:
            decoded = json.loads(raw)
        except (TypeError, ValueError):
            self._logger.warning(
                f"Client {client_id} has unreadable form data; "
                "using contact fields only"
            )
            return {}
        if not isinstance(decoded, dict):
            self._logger.warning(
                f"Client {client_id} form data is not an object; ignoring it"
            )
            return {}
        return decoded


__all__ = ["SqlAlchemyClientRepository"]
