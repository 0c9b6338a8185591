import io
from pathlib import Path

import pytest
from rich.console import Console

from sortfiles.config import SortConfig
from sortfiles.reporter import Reporter


class CapturedConsole(Console):
    def __init__(self, width: int = 400):
        self.buffer = io.StringIO()
        super().__init__(file=self.buffer, color_system=None, width=width,
                         highlight=False, emoji=False)

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def config(home: Path) -> SortConfig:
    return SortConfig.default(home)


@pytest.fixture
def console() -> CapturedConsole:
    return CapturedConsole()


@pytest.fixture
def reporter(console: CapturedConsole) -> Reporter:
    return Reporter(console, verbose=False)


@pytest.fixture
def verbose_reporter(console: CapturedConsole) -> Reporter:
    return Reporter(console, verbose=True)
