"""Shared fixtures: an in-process Redis and a clock the tests can move."""

from collections.abc import Generator

import fakeredis
import pytest
import structlog

from linkrank.observability import quiet_defaults
from linkrank.service import LinkRankService
from linkrank.settings import RankingSettings


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def conn() -> Generator[fakeredis.FakeRedis]:
    client = fakeredis.FakeRedis(decode_responses=True)
    client.flushall()
    yield client
    client.flushall()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> RankingSettings:
    return RankingSettings(_env_file=None)


@pytest.fixture
def service(conn, settings, clock) -> LinkRankService:
    return LinkRankService(conn, settings, clock)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None]:
    yield
    structlog.reset_defaults()
    quiet_defaults()
