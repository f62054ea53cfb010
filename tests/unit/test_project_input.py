from __future__ import annotations

import logging
from typing import List

import pytest

from projboard.app import Board
from projboard.components.project_input import GatheredInput, ProjectInput, SubmitOutcome
from projboard.config import Settings
from projboard.domain.models import RecordStatus
from projboard.errors import ValidationFailure
from projboard.store import RecordStore, Snapshot
from projboard.ui.elements import Screen, SubmitEvent

VALID = {"title": "Build API", "description": "Design and implement", "people": "3"}


def test_valid_submission_commits_and_clears(board: Board) -> None:
    outcome = board.project_input.submit(**VALID)

    assert outcome is SubmitOutcome.COMMITTED
    assert len(board.store) == 1
    record = board.store.snapshot()[0]
    assert (record.title, record.description, record.capacity) == ("Build API", "Design and implement", 3)
    assert record.status is RecordStatus.ACTIVE
    assert board.project_input.form.values() == {"title": "", "description": "", "people": ""}


def test_valid_submission_reaches_active_list_only(board: Board) -> None:
    board.project_input.submit(**VALID)

    assert len(board.lists[RecordStatus.ACTIVE].items) == 1
    assert len(board.lists[RecordStatus.FINISHED].items) == 0


def test_empty_title_is_rejected_and_input_kept(board: Board, notifier) -> None:
    values = {**VALID, "title": ""}

    outcome = board.project_input.submit(**values)

    assert outcome is SubmitOutcome.REJECTED
    assert len(board.store) == 0
    assert board.project_input.form.values() == values
    assert len(notifier.messages) == 1
    assert "title" in notifier.messages[0]


def test_non_numeric_people_is_rejected(board: Board, notifier) -> None:
    outcome = board.project_input.submit(**{**VALID, "people": "abc"})

    assert outcome is SubmitOutcome.REJECTED
    assert len(board.store) == 0
    failure = board.project_input.gather_input()
    assert isinstance(failure, ValidationFailure)
    assert failure.errors == {"people": ["required", "min", "max"]}


@pytest.mark.parametrize(
    ("people", "expected"),
    [
        ("1", SubmitOutcome.COMMITTED),
        ("0", SubmitOutcome.REJECTED),
        ("10", SubmitOutcome.COMMITTED),
        ("11", SubmitOutcome.REJECTED),
        ("2.5", SubmitOutcome.REJECTED),
        ("4.0", SubmitOutcome.COMMITTED),
    ],
)
def test_people_boundaries(board: Board, people: str, expected: SubmitOutcome) -> None:
    assert board.project_input.submit(**{**VALID, "people": people}) is expected


@pytest.mark.parametrize(
    ("description", "expected"),
    [("abcde", SubmitOutcome.COMMITTED), ("abcd", SubmitOutcome.REJECTED)],
)
def test_description_boundaries(board: Board, description: str, expected: SubmitOutcome) -> None:
    assert board.project_input.submit(**{**VALID, "description": description}) is expected


def test_whitespace_title_is_rejected(board: Board) -> None:
    assert board.project_input.submit(**{**VALID, "title": "   "}) is SubmitOutcome.REJECTED


def test_gather_input_returns_parsed_values(board: Board) -> None:
    board.project_input.form.fill(**VALID)

    gathered = board.project_input.gather_input()

    assert gathered == GatheredInput(title="Build API", description="Design and implement", capacity=3)


def test_submit_handler_prevents_default_first(store: RecordStore, screen: Screen, notifier) -> None:
    seen: List[bool] = []
    project_input = ProjectInput(store, screen, notifier=notifier, settings=Settings())
    event = SubmitEvent()
    store.subscribe(lambda records: seen.append(event.default_prevented))

    project_input.form.fill(**VALID)
    project_input._submit_handler(event)  # type: ignore[misc]

    assert event.default_prevented is True
    assert seen == [True]


def test_rejected_submission_still_prevents_default(board: Board) -> None:
    board.project_input.form.fill(**{**VALID, "title": ""})

    event = board.project_input.form.submit()

    assert event.default_prevented is True
    assert board.project_input.last_outcome is SubmitOutcome.REJECTED


def test_handler_is_registered_once(board: Board) -> None:
    received: List[Snapshot] = []
    board.store.subscribe(received.append)
    board.project_input.configure()

    board.project_input.submit(**VALID)

    assert len(received) == 1


def test_limits_come_from_settings(store: RecordStore, screen: Screen, notifier) -> None:
    settings = Settings(capacity_min=2, capacity_max=4, description_min_length=1)
    project_input = ProjectInput(store, screen, notifier=notifier, settings=settings)

    assert project_input.submit(title="x", description="y", people="1") is SubmitOutcome.REJECTED
    assert project_input.submit(title="x", description="y", people="4") is SubmitOutcome.COMMITTED
    assert project_input.submit(title="x", description="y", people="5") is SubmitOutcome.REJECTED


def test_form_is_attached_at_the_start(board: Board) -> None:
    assert "user-input" in board.screen
    assert board.screen.element_ids[0] == "user-input"


@pytest.mark.parametrize("people", ["1_0", "٣", "9.99999999999999999"])
def test_people_outside_plain_decimal_integers_is_rejected(board: Board, people: str) -> None:
    outcome = board.project_input.submit(**{**VALID, "people": people})

    assert outcome is SubmitOutcome.REJECTED
    assert len(board.store) == 0


def test_rejection_is_logged_with_failing_fields(board: Board, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="projboard.components.project_input"):
        board.project_input.submit(**{**VALID, "title": "", "people": "0"})

    rejected = [entry for entry in caplog.records if entry.message == "Project input rejected"]
    assert len(rejected) == 1
    assert rejected[0].levelno == logging.WARNING
    assert rejected[0].fields == ["title", "people"]


def test_committed_submission_logs_no_rejection(board: Board, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="projboard.components.project_input"):
        board.project_input.submit(**VALID)

    assert not [entry for entry in caplog.records if entry.message == "Project input rejected"]
