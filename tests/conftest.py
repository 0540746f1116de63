"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from gendesk.core import config as config_module

ENV_VARS = [
    "pkgname", "SRCDEST", "pkgdesc", "_exec", "_name", "_genericname",
    "_mimetypes", "_comment", "_categories", "_custom",
]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    """Point the settings file into tmp_path and drop the Config singleton."""
    settings = tmp_path / "config" / "settings.json"
    monkeypatch.setattr(config_module, "SETTINGS_FILE", settings)
    monkeypatch.setattr(config_module.Config, "_instance", None)
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return settings


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Return an empty working directory that is also the cwd."""
    d = tmp_path / "work"
    d.mkdir()
    monkeypatch.chdir(d)
    return d


class FakeResponse:
    def __init__(self, content: bytes = b"", status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get in the icon fetcher; set .response or .error before use."""
    from gendesk.core import icon_fetcher

    class FakeGet:
        response = FakeResponse(b"\x89PNG\r\n\x1a\nfake")
        error: Exception | None = None
        calls: list = []

        def __call__(self, url, timeout=None):
            self.calls.append((url, timeout))
            if self.error is not None:
                raise self.error
            return self.response

    fake = FakeGet()
    fake.calls = []
    monkeypatch.setattr(icon_fetcher.requests, "get", fake)
    return fake


@pytest.fixture
def default_icon(tmp_path: Path) -> Path:
    """A stand-in for /usr/share/pixmaps/default.png."""
    path = tmp_path / "default.png"
    path.write_bytes(b"\x89PNG default")
    return path
