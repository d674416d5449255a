from __future__ import annotations

import io

import pytest
from rich.console import Console

from core.config import AppSettings
from core.domain.errors import ClipboardError


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env / KC_* variables out of the tests."""

    monkeypatch.chdir(tmp_path)
    for key in (
        "KC_TRACE_URL",
        "KC_HTTP_TIMEOUT_SECONDS",
        "KC_USER_AGENT",
        "KC_IST_ZONE_NAME",
        "KC_REFRESH_INTERVAL_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)

    # env_file is bound when AppSettings is defined, so point the user .env at tmp_path too.
    user_config = tmp_path / "cfg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(user_config))
    monkeypatch.setitem(AppSettings.model_config, "env_file", (".env", str(user_config / "kc-cli" / ".env")))


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


def output_of(console: Console) -> str:
    return console.file.getvalue()


class StaticSource:
    def __init__(self, body: str = "", error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.calls = 0

    def fetch(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.body


class RecordingClipboard:
    def __init__(self, fail_with: str | None = None) -> None:
        self.fail_with = fail_with
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        if self.fail_with is not None:
            raise ClipboardError(self.fail_with)
        self.copied.append(text)
