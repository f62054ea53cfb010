"""
Pytest configuration for the project board.

Provides fixtures for:
- A fresh injected store per test (the process-wide store is never touched)
- A screen host and a fully assembled board
- A notifier that records alerts instead of printing them
"""

from __future__ import annotations

import logging
from typing import Generator, List

import pytest

from projboard.app import Board, build_board
from projboard.config import Settings, get_settings
from projboard.store import RecordStore
from projboard.ui.elements import Screen


class RecordingNotifier:
    """Notifier that keeps every alert message."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def alert(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture(autouse=True)
def _reset_cached_settings() -> Generator[None, None, None]:
    """
    Drop cached settings so each test reads the environment afresh.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """
    Undo `configure_logging` calls made by CLI tests.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the default validation limits."""
    return Settings(
        log_level="DEBUG",
        capacity_min=1,
        capacity_max=10,
        description_min_length=5,
        render_width=100,
    )


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def screen(test_settings: Settings) -> Screen:
    return Screen(width=test_settings.render_width)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def board(
    store: RecordStore, test_settings: Settings, notifier: RecordingNotifier
) -> Generator[Board, None, None]:
    """A complete board (form plus Active and Finished lists) around `store`."""
    assembled = build_board(store=store, settings=test_settings, notifier=notifier)
    try:
        yield assembled
    finally:
        assembled.close()
