from __future__ import annotations

import json

from forgiveme.adapters.storage_local import StorageLocal
from forgiveme.adapters.storage_memory import StorageMemory
from forgiveme.adapters.webhook_notifier import WebhookNotifier
from forgiveme.app.controller import AppController
from forgiveme.viewmodels.settings_vm import SettingsVM


def test_ensure_ready_wires_usecases_and_loads_log() -> None:
    storage = StorageMemory({"forgive_me_responses_v1": '[{"id": 1, "answer": "yes"}]'})
    controller = AppController(SettingsVM(), storage=storage)

    log = controller.ensure_ready()

    assert controller.response_log is log
    assert controller.uc_record is not None
    assert controller.uc_clear is not None
    assert [r.name for r in log.all()] == [""]
    assert controller.ensure_ready() is log


def test_reset_rebuilds_from_current_settings() -> None:
    storage = StorageMemory({"other_key": '[{"id": 9, "name": "Kim", "answer": "no"}]'})
    settings = SettingsVM()
    controller = AppController(settings, storage=storage)
    assert len(controller.ensure_ready()) == 0

    settings.storage_key = "other_key"
    controller.reset()

    assert [r.id for r in controller.ensure_ready().all()] == [9]


def test_webhook_notifier_built_only_when_configured(tmp_path) -> None:
    settings = SettingsVM()
    settings.data_dir = str(tmp_path)
    controller = AppController(settings)
    controller.ensure_ready()
    assert controller.response_log._notifier is None

    settings.webhook_url = "https://hooks.example/x"
    hooked = AppController(settings)
    hooked.ensure_ready()
    assert isinstance(hooked.response_log._notifier, WebhookNotifier)


def test_load_settings_layers_file_and_env(tmp_path) -> None:
    (tmp_path / "settings.json").write_text(
        json.dumps({"admin_pin": "1111", "storage_key": "from_file"}), encoding="utf-8"
    )
    controller = AppController(SettingsVM())

    controller.load_settings({"FORGIVEME_DATA_DIR": str(tmp_path), "FORGIVEME_ADMIN_PIN": "2222"})

    assert controller.settings_vm.admin_pin == "2222"
    assert controller.settings_vm.storage_key == "from_file"
    assert controller.settings_vm.data_dir == str(tmp_path)
    log = controller.ensure_ready()
    assert isinstance(controller.storage, StorageLocal)
    assert log.storage_key == "from_file"


def test_load_settings_ignores_invalid_file(tmp_path) -> None:
    (tmp_path / "settings.json").write_text('{"unknown": 1}', encoding="utf-8")
    controller = AppController(SettingsVM())

    controller.load_settings({"FORGIVEME_DATA_DIR": str(tmp_path)})

    assert controller.settings_vm.admin_pin == "1234"


def test_load_settings_ignores_corrupt_file(tmp_path) -> None:
    (tmp_path / "settings.json").write_text("{oops", encoding="utf-8")
    controller = AppController(SettingsVM())

    controller.load_settings({"FORGIVEME_DATA_DIR": str(tmp_path)})

    assert controller.settings_vm.storage_key == "forgive_me_responses_v1"
