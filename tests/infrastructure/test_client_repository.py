"""Tests for the SQLAlchemy client repository."""

import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text

from fincalc.infrastructure.client_repository import (
    SqlAlchemyClientRepository,
)


@pytest.fixture()
def db_port(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'clients.db'}")
    with engine.begin() as conn:
        conn.execute(
            text(
                """
                CREATE TABLE clients (
                    id TEXT PRIMARY KEY,
                    first_name TEXT,
                    last_name TEXT,
                    email TEXT,
                    data TEXT
                )
                """
            )
        )
        conn.execute(
            text(
                "INSERT INTO clients VALUES "
                "(:id, :first_name, :last_name, :email, :data)"
            ),
            [
                {
                    "id": "c1",
                    "first_name": "Dana",
                    "last_name": "Smith",
                    "email": "dana@example.com",
                    "data": json.dumps(
                        {
                            "firstName": "Old name",
                            "annualIncome": 95000,
                            "assets": [
                                {
                                    "id": "a1",
                                    "type": "shares",
                                    "currentValue": "40000",
                                }
                            ],
                        }
                    ),
                },
                {
                    "id": "c2",
                    "first_name": "Alex",
                    "last_name": "Brown",
                    "email": None,
                    "data": "{not json",
                },
                {
                    "id": "c3",
                    "first_name": "Jo",
                    "last_name": "Adams",
                    "email": "jo@example.com",
                    "data": None,
                },
            ],
        )
    port = MagicMock()
    port.get_engine.return_value = engine
    yield port
    engine.dispose()


def test_fetch_client_parses_stored_form(db_port) -> None:
    """Stored JSON is parsed and contact columns take precedence."""
    repository = SqlAlchemyClientRepository(db_port, logger=MagicMock())

    record = repository.fetch_client("c1")

    assert record.id == "c1"
    assert record.full_name == "Dana Smith"
    assert record.email == "dana@example.com"
    assert record.flat_value("annualIncome") == Decimal("95000")
    assert record.assets[0].current_value == Decimal("40000")


def test_fetch_client_returns_none_when_absent(db_port) -> None:
    """Unknown ids return None."""
    repository = SqlAlchemyClientRepository(db_port, logger=MagicMock())

    assert repository.fetch_client("missing") is None


def test_fetch_client_tolerates_unreadable_data(db_port) -> None:
    """Malformed JSON is logged and contact fields are still returned."""
    logger = MagicMock()
    repository = SqlAlchemyClientRepository(db_port, logger=logger)

    record = repository.fetch_client("c2")

    assert record.full_name == "Alex Brown"
    assert record.flat_fields == {}
    logger.warning.assert_called_once()


def test_list_clients_orders_by_name(db_port) -> None:
    """Listings are ordered by last name."""
    repository = SqlAlchemyClientRepository(db_port, logger=MagicMock())

    listings = repository.list_clients()

    assert [item.id for item in listings] == ["c3", "c2", "c1"]
    assert listings[1].email == ""
    assert listings[0].display_name == "Jo Adams"
