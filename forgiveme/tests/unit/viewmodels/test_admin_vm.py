from __future__ import annotations

from forgiveme.adapters.storage_memory import StorageMemory
from forgiveme.domain.entities import ResponseRecord
from forgiveme.domain.response_log import ResponseLog
from forgiveme.domain.time_utils import format_local
from forgiveme.usecases.clear_responses import ClearResponses
from forgiveme.viewmodels.admin_vm import CLEAR_PROMPT, EMPTY_TEXT, AdminVM


def _log_with(*records: ResponseRecord) -> ResponseLog:
    log = ResponseLog(StorageMemory())
    for record in records:
        log.append(record)
    return log


def _vm(log: ResponseLog, confirm=None, on_changed=None) -> AdminVM:
    return AdminVM(
        list_responses=log.all,
        clear_responses=ClearResponses(log),
        confirm=confirm,
        on_changed=on_changed,
    )


def test_rows_format_names_and_times() -> None:
    log = _log_with(
        ResponseRecord(id=1, name="", answer="no", time="2026-02-14T10:00:00.000Z", page_at="landing"),
        ResponseRecord(id=2, name="Alex", answer="yes", time="2026-02-14T11:00:00.000Z", page_at="landing"),
    )
    vm = _vm(log)

    rows = vm.rows()

    assert [row.name for row in rows] == ["Alex", "Anonymous"]
    assert [row.answer for row in rows] == ["yes", "no"]
    assert rows[0].at == f"At: {format_local('2026-02-14T11:00:00.000Z')}"
    assert vm.empty_text() is None


def test_unreadable_time_is_echoed() -> None:
    log = _log_with(ResponseRecord(id=1, name="Jo", answer="yes", time="yesterday", page_at="landing"))

    assert _vm(log).rows()[0].at == "At: yesterday"


def test_empty_log_shows_placeholder() -> None:
    vm = _vm(_log_with())

    assert vm.rows() == []
    assert vm.empty_text() == EMPTY_TEXT


def test_clear_declined_keeps_records() -> None:
    prompts = []
    changed = []
    log = _log_with(ResponseRecord(id=1, name="Jo", answer="yes", time="", page_at="landing"))
    vm = _vm(log, confirm=lambda text: prompts.append(text) or False, on_changed=lambda: changed.append(1))

    assert vm.cmd_clear() is False

    assert prompts == [CLEAR_PROMPT]
    assert len(log.all()) == 1
    assert changed == []


def test_clear_confirmed_drops_records() -> None:
    changed = []
    log = _log_with(ResponseRecord(id=1, name="Jo", answer="yes", time="", page_at="landing"))
    vm = _vm(log, confirm=lambda _text: True, on_changed=lambda: changed.append(1))

    assert vm.cmd_clear() is True

    assert log.all() == ()
    assert changed == [1]


def test_clear_without_confirm_hook_does_nothing() -> None:
    log = _log_with(ResponseRecord(id=1, name="Jo", answer="yes", time="", page_at="landing"))

    assert _vm(log).cmd_clear() is False
    assert len(log.all()) == 1
