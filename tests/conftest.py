"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from core.notifier import Notifier
from core.pipeline import RecordGenerationPipeline
from models.record import GenerationForm, Record
from utils.config import Config


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def notifier(clock: FakeClock) -> Notifier:
    return Notifier(duration=5.0, clock=clock)


@pytest.fixture()
def settings() -> Config:
    """Defaults, independent of the developer's environment / .env file."""
    return Config()


@pytest.fixture()
def pipeline(settings: Config) -> RecordGenerationPipeline:
    return RecordGenerationPipeline(settings)


@pytest.fixture()
def mixed_form() -> GenerationForm:
    """One valid CNPJ, one repeated-digit CNPJ, one valid email."""
    return GenerationForm(
        cnpj_text="11.222.333/0001-81\n11111111111111",
        email_text="a@b.com",
        action="ADD",
    )


@pytest.fixture()
def sample_records() -> list[Record]:
    return [
        Record(
            user="ana@empresa.com",
            country="BR",
            vendor_account_id="11222333000181",
            vendor_id="7312b2db-b028-4bd9-9d8a-a8cfa006029e",
            vendor_name="AMBEV",
            action="ADD",
        ),
        Record(
            user="joao@empresa.com",
            country="BR",
            vendor_account_id="04252011000110",
            vendor_id="7312b2db-b028-4bd9-9d8a-a8cfa006029e",
            vendor_name="AMBEV",
            action="ADD",
        ),
    ]
