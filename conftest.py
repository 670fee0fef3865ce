"""Configure pytest."""

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

# Add src directory to Python path so tests run without an editable install
src_path = str(Path(__file__).parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from jsonhelpers.models import KeyValuePair  # noqa: E402
from jsonhelpers.utils import config as cfg  # noqa: E402

PI_OBJECT_JSON = '{"Key":"Pi","Value":3.14159}'


@pytest.fixture
def pi_pair() -> KeyValuePair[str, float]:
    """The ("Pi", 3.14159) pair used across the serialization tests."""
    return KeyValuePair[str, float](key="Pi", value=3.14159)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the config module at a temporary directory and clear env overrides."""
    config_dir = tmp_path / "config" / "jsonhelpers"
    monkeypatch.setattr(cfg, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(cfg, "CONFIG_FILE", config_dir / "config.toml")
    for name in cfg.PERSISTED_FIELDS:
        monkeypatch.delenv(f"JSONHELPERS_SERIALIZER_{name.upper()}", raising=False)
    yield config_dir


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI attaches so they never outlive a captured stream."""
    from jsonhelpers.utils import debug as dbg

    logger = logging.getLogger(dbg.LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    dbg._logger = None
