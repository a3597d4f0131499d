import logging
import pytest
from pathlib import Path
from app.logger import setup_logging
from app.settings_store import SettingsStore


@pytest.fixture(autouse=True)
def logging_ready() -> None:
    setup_logging(level=logging.DEBUG)


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "launcher.dat"


@pytest.fixture
def store(settings_path: Path) -> SettingsStore:
    return SettingsStore(str(settings_path))


class RecordingLauncher:
    """Process launcher stand-in that records commands instead of running them."""

    def __init__(self, accept: bool = True):
        self.accept = accept
        self.commands = []

    def launch(self, command: str) -> bool:
        self.commands.append(command)
        return self.accept


@pytest.fixture
def recording_launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    path = tmp_path / "launch.cmd"
    path.write_text("run --user={name} --mem={ram}g --dir=%cd%\n", encoding="utf-8")
    return path


@pytest.fixture
def rejecting_launcher() -> RecordingLauncher:
    return RecordingLauncher(accept=False)
