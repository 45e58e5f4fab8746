import pytest


CONFIG_VARS = ["LINKSCAN_MAX_INPUT_LENGTH", "LINKSCAN_LOG_LEVEL", "LINKSCAN_UNIQUE"]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Unset linkscan variables and run from an empty directory."""
    for name in CONFIG_VARS:
        # setenv first so monkeypatch also undoes anything load_dotenv sets
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
