"""Shared test fixtures."""

from dataclasses import dataclass

import pytest
from loguru import logger

from hydrator import Resource, resource
from hydrator.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)


@resource
@dataclass
class FixtureDetail(Resource):
    x: int = 0


@resource
@dataclass
class FixtureOrder(Resource):
    id: str = ""
    detail: FixtureDetail | None = None
    note: str = "untouched"

    @classmethod
    def __primary_key__(cls) -> str:
        return "id"

    @classmethod
    def __nested_data_key__(cls) -> str:
        return "data"

    @classmethod
    def __resource_properties__(cls) -> dict[str, type]:
        return {"detail": FixtureDetail}


@pytest.fixture
def detail_cls():
    return FixtureDetail


@pytest.fixture
def order_cls():
    return FixtureOrder
