import pytest
from PyQt6.QtCore import QSettings

from imeswitch.core import app_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point every settings read/write at a throwaway INI file."""
    ini_path = str(tmp_path / "imeswitch.ini")

    def _settings():
        return QSettings(ini_path, QSettings.Format.IniFormat)

    monkeypatch.setattr(app_settings, "_get_settings", _settings)
    return ini_path
