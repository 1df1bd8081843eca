import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add the src directory to the path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from whatdidido.config import HistorySettings, get_settings  # noqa: E402
from whatdidido.services import HistoryImporter, LogService  # noqa: E402
from whatdidido.store import HistoryStore  # noqa: E402


class FakeClock:
    """Callable clock returning a fixed local time that tests can move."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure every test builds settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Provide a not-yet-created data directory under tmp_path."""
    return tmp_path / "data"


@pytest.fixture
def settings(tmp_path, data_dir) -> HistorySettings:
    """Create HistorySettings pointing at a temporary data directory."""
    return HistorySettings(
        data_dir=data_dir,
        shell_history_path=tmp_path / ".zsh_history",
        lock_timeout=0.2,
    )


@pytest.fixture
def store(settings) -> HistoryStore:
    return HistoryStore(settings)


@pytest.fixture
def clock() -> FakeClock:
    """A clock fixed at 09:00 local time on 2024-05-10."""
    return FakeClock(datetime(2024, 5, 10, 9, 0, 0).astimezone())


@pytest.fixture
def service(store, clock) -> LogService:
    return LogService(store, clock=clock)


@pytest.fixture
def importer(service) -> HistoryImporter:
    return HistoryImporter(service)
