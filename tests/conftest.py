import pytest

from release_tools.core.config import get_release_settings

SMART_PM = (
    "package Google::GeoCoder::Smart;\n"
    "\n"
    "use strict;\n"
    "use warnings;\n"
    "\n"
    "our $VERSION = '1.0.0';\n"
    "\n"
    "1;\n"
)


@pytest.fixture(autouse=True)
def release_env(tmp_path, monkeypatch):
    """Run every test from an empty distribution root with default settings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RELEASE_MODULE_PATH", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_release_settings.cache_clear()
    yield tmp_path
    get_release_settings.cache_clear()


@pytest.fixture
def module_file(tmp_path):
    path = tmp_path / "lib" / "Google" / "GeoCoder" / "Smart.pm"
    path.parent.mkdir(parents=True)
    path.write_bytes(SMART_PM.encode("utf-8"))
    return path
