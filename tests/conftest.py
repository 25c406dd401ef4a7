"""Shared test fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from initq import InitQSettings, TaskState


class CountingAction:
    """Task action that returns a fixed state and counts its invocations."""

    def __init__(self, result: TaskState = TaskState.DONE) -> None:
        self.result = result
        self.calls = 0

    def __call__(self) -> TaskState:
        self.calls += 1
        return self.result


@pytest.fixture()
def counting_action() -> Callable[..., CountingAction]:
    return CountingAction


@pytest.fixture()
def error_settings() -> InitQSettings:
    return InitQSettings(defects_are_errors=True)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("INITQ_DEFECTS_ARE_ERRORS", raising=False)
    yield
    logging.getLogger("initq").setLevel(logging.NOTSET)
