"""Application port for client record access."""

from dataclasses import dataclass
from typing import Protocol

from fincalc.domain.models.client import ClientRecord


@dataclass(frozen=True)
class ClientListing:
    """Row describing a stored client for selection lists."""

    id: str
    first_name: str
    last_name: str
    email: str

    @property
    def display_name(self) -> str:
        """Return the name shown in client pickers."""
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.email or self.id


class ClientRepositoryPort(Protocol):
    """Port exposing read access to stored client records."""

    def fetch_client(self, client_id: str) -> ClientRecord | None:
        """Return the client record for an id, or None when absent."""

    def list_clients(self) -> list[ClientListing]:
        """Return every stored client ordered by name."""


__all__ = ["ClientListing", "ClientRepositoryPort"]
