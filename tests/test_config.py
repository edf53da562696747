from pathlib import Path

import pytest
from pydantic import ValidationError

from vault.config import Settings
from vault.di import build_container


def test_missing_work_folder_is_rejected(monkeypatch, tmp_path: Path):
    monkeypatch.delenv("WORK_FOLDER", raising=False)
    monkeypatch.chdir(tmp_path)  # no .env here
    with pytest.raises(ValidationError):
        Settings()


def test_empty_work_folder_is_rejected(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("WORK_FOLDER", "")
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValidationError):
        Settings()


def test_settings_from_environment(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WORK_FOLDER", str(tmp_path / "vault"))
    monkeypatch.setenv("PORT", "8123")
    s = Settings()
    assert s.WORK_FOLDER == tmp_path / "vault"
    assert s.PORT == 8123
    assert s.HOST == "0.0.0.0"
    assert s.API_PREFIX == "/api"


def test_container_creates_root(tmp_path: Path):
    c = build_container(Settings(WORK_FOLDER=tmp_path / "new-vault"))
    assert (tmp_path / "new-vault").is_dir()
    assert c.confiner.root == (tmp_path / "new-vault").resolve()
    assert c.file_service.confiner is c.confiner


@pytest.mark.parametrize("module", ["vault_server.http_app", "vault_server.main"])
def test_entry_points_refuse_to_start_without_work_folder(monkeypatch, tmp_path: Path, module):
    import importlib

    monkeypatch.delenv("WORK_FOLDER", raising=False)
    monkeypatch.chdir(tmp_path)
    entry = importlib.import_module(module)
    with pytest.raises(SystemExit) as exc:
        entry.main()
    assert exc.value.code == 1
    assert not (tmp_path / "vault").exists()
