"""Shared fixtures for the pogo_api test suite."""

from pathlib import Path
from typing import Any

import orjson
import pytest

from pogo_api.config import ApiConfig
from pogo_api.utils.core.config_registry import clear_config
from pogo_api.utils.core.logger import configure_logging_system

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session", autouse=True)
def _log_to_tmp(tmp_path_factory: pytest.TempPathFactory) -> None:
    """Send module log files to a temporary directory."""
    log_root = tmp_path_factory.mktemp("logs")
    configure_logging_system(
        ApiConfig(project_root=log_root, logging_level="DEBUG", logging_console_colors=False)
    )


@pytest.fixture(autouse=True)
def _reset_config() -> Any:
    """Keep the global config registry empty between tests."""
    clear_config()
    yield
    clear_config()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def game_master_records() -> list[Any]:
    """The records of the sample game master export."""
    return orjson.loads((FIXTURES_DIR / "game_master.json").read_bytes())


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project directory holding the sample game master and translations."""
    data_dir = tmp_path / "data"
    translations_dir = data_dir / "translations"
    translations_dir.mkdir(parents=True)

    (data_dir / "game_master.json").write_bytes((FIXTURES_DIR / "game_master.json").read_bytes())
    for translation_file in (FIXTURES_DIR / "translations").glob("*.json"):
        (translations_dir / translation_file.name).write_bytes(translation_file.read_bytes())

    return tmp_path


@pytest.fixture
def api_config(project_root: Path) -> ApiConfig:
    return ApiConfig(
        project_root=project_root,
        languages=["English", "German"],
        logging_console_colors=False,
    )
