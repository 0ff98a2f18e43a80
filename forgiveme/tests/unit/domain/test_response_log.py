from __future__ import annotations

import json

from forgiveme.adapters.storage_memory import StorageMemory
from forgiveme.domain.entities import ResponseRecord
from forgiveme.domain.response_log import DEFAULT_STORAGE_KEY, ResponseLog

KEY = DEFAULT_STORAGE_KEY


def _record(rid: int, name: str = "Alex", answer: str = "yes") -> ResponseRecord:
    return ResponseRecord(
        id=rid,
        name=name,
        answer=answer,
        time=f"2026-02-14T10:00:0{rid % 10}.000Z",
        page_at="landing",
    )


class RecordingNotifier:
    def __init__(self, fail: bool = False) -> None:
        self.records = []
        self.fail = fail

    def notify(self, record: ResponseRecord) -> None:
        self.records.append(record)
        if self.fail:
            raise RuntimeError("network down")


def test_append_puts_newest_first_and_persists() -> None:
    storage = StorageMemory()
    log = ResponseLog(storage)

    for rid in (1, 2, 3):
        log.append(_record(rid))

    assert [r.id for r in log.all()] == [3, 2, 1]
    persisted = json.loads(storage.slots[KEY])
    assert [item["id"] for item in persisted] == [3, 2, 1]
    assert persisted[0] == {
        "id": 3,
        "name": "Alex",
        "answer": "yes",
        "time": "2026-02-14T10:00:03.000Z",
        "pageAt": "landing",
    }


def test_all_returns_snapshot_unaffected_by_later_appends() -> None:
    log = ResponseLog(StorageMemory())
    log.append(_record(1))

    snapshot = log.all()
    log.append(_record(2))

    assert [r.id for r in snapshot] == [1]
    assert len(log.all()) == 2


def test_append_survives_storage_failure() -> None:
    storage = StorageMemory(fail_writes=True)
    log = ResponseLog(storage)

    log.append(_record(1))

    assert [r.id for r in log.all()] == [1]
    assert KEY not in storage.slots


def test_append_notifies_and_ignores_notifier_errors() -> None:
    notifier = RecordingNotifier(fail=True)
    log = ResponseLog(StorageMemory(), notifier=notifier)

    log.append(_record(7))

    assert [r.id for r in notifier.records] == [7]
    assert [r.id for r in log.all()] == [7]


def test_clear_without_confirmation_is_a_noop() -> None:
    storage = StorageMemory()
    log = ResponseLog(storage)
    log.append(_record(1))

    assert log.clear(False) is False
    assert log.clear(lambda: False) is False

    assert [r.id for r in log.all()] == [1]
    assert KEY in storage.slots


def test_clear_with_confirmation_erases_records_and_mirror() -> None:
    storage = StorageMemory()
    log = ResponseLog(storage)
    log.append(_record(1))
    log.append(_record(2))

    assert log.clear(lambda: True) is True

    assert log.all() == ()
    assert KEY not in storage.slots


def test_load_coerces_missing_name_to_empty_string() -> None:
    storage = StorageMemory({KEY: '[{"id":1,"answer":"yes"}]'})
    log = ResponseLog(storage)

    log.load()

    records = log.all()
    assert len(records) == 1
    assert records[0].name == ""
    assert records[0].answer == "yes"


def test_load_coerces_non_string_names() -> None:
    payload = [
        {"id": 3, "name": None, "answer": "no"},
        {"id": 2, "name": 42, "answer": "yes"},
        {"id": 1, "name": "Sam", "answer": "yes"},
    ]
    log = ResponseLog(StorageMemory({KEY: json.dumps(payload)}))

    log.load()

    assert [r.name for r in log.all()] == ["", "", "Sam"]


def test_load_corrupt_or_wrong_shape_yields_empty_log() -> None:
    for raw in ("{not json", '{"id": 1}', '"text"', "42"):
        log = ResponseLog(StorageMemory({KEY: raw}))
        log.load()
        assert log.all() == ()


def test_load_keeps_non_object_items_as_name_only_records() -> None:
    storage = StorageMemory({KEY: '[1, "x", {"id": 5, "name": "Jo", "answer": "no"}]'})
    log = ResponseLog(storage)

    log.load()

    assert [r.id for r in log.all()] == [None, None, 5]
    assert [r.name for r in log.all()] == ["", "", "Jo"]

    log.append(_record(6))
    assert json.loads(storage.slots[KEY])[1:] == [
        {"name": ""},
        {"name": ""},
        {"id": 5, "name": "Jo", "answer": "no"},
    ]


def test_round_trip_preserves_persisted_content() -> None:
    original = [
        {"id": 2, "name": "Alex", "answer": "yes", "time": "2026-02-14T10:00:02.000Z", "pageAt": "landing", "note": "hi"},
        {"id": 1, "name": "Sam", "answer": "no", "time": "2026-02-14T10:00:01.000Z", "pageAt": "landing"},
    ]
    storage = StorageMemory({KEY: json.dumps(original)})
    log = ResponseLog(storage)
    log.load()

    log.append(_record(3))

    assert json.loads(storage.slots[KEY])[1:] == original


def test_round_trip_keeps_explicit_nulls() -> None:
    original = [{"id": 1, "name": "A", "answer": "yes", "time": None, "pageAt": "landing"}]
    storage = StorageMemory({KEY: json.dumps(original)})
    log = ResponseLog(storage)
    log.load()

    log.append(_record(2))

    assert json.loads(storage.slots[KEY])[1:] == original


def test_round_trip_after_name_coercion() -> None:
    storage = StorageMemory({KEY: '[{"id":1,"answer":"yes"}]'})
    log = ResponseLog(storage)
    log.load()
    log.append(_record(2))

    reloaded = ResponseLog(storage)
    reloaded.load()

    assert json.loads(storage.slots[KEY])[1:] == [{"id": 1, "name": "", "answer": "yes"}]
    assert reloaded.all() == log.all()


def test_separate_keys_do_not_collide() -> None:
    storage = StorageMemory()
    ResponseLog(storage, storage_key="a").append(_record(1))
    other = ResponseLog(storage, storage_key="b")
    other.load()

    assert other.all() == ()
