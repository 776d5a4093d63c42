import os
from pathlib import Path
from unittest.mock import patch

from utils.env import _find_project_root, load_project_dotenv, resolve_dotenv_path

# --- _find_project_root --- #


def test_find_project_root_found_in_start(tmp_path: Path):
    start_dir = tmp_path / "service"
    start_dir.mkdir()
    (start_dir / "pyproject.toml").touch()

    assert _find_project_root(start=start_dir) == start_dir


def test_find_project_root_found_levels_up(tmp_path: Path):
    """pyproject.toml several directories above the start is found."""
    (tmp_path / "pyproject.toml").touch()
    start_dir = tmp_path / "api" / "routes" / "nested"
    start_dir.mkdir(parents=True)

    assert _find_project_root(start=start_dir) == tmp_path


# --- resolve_dotenv_path --- #


def test_resolve_dotenv_path_prefers_explicit_file(tmp_path: Path, monkeypatch):
    explicit = tmp_path / "staging.env"
    monkeypatch.setenv("MARGINIQ_ENV_FILE", str(explicit))

    assert resolve_dotenv_path() == explicit


@patch("utils.env._find_project_root")
def test_resolve_dotenv_path_defaults_to_project_root(mock_find_root, tmp_path: Path, monkeypatch):
    monkeypatch.delenv("MARGINIQ_ENV_FILE", raising=False)
    mock_find_root.return_value = tmp_path

    assert resolve_dotenv_path() == tmp_path / ".env"


# --- load_project_dotenv --- #


@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_calls_load_dotenv_when_file_exists(mock_find_root, mock_load_dotenv, tmp_path: Path, monkeypatch):
    monkeypatch.delenv("MARGINIQ_ENV_FILE", raising=False)
    env_file = tmp_path / ".env"
    env_file.touch()
    mock_find_root.return_value = tmp_path

    assert load_project_dotenv() is True
    mock_load_dotenv.assert_called_once_with(dotenv_path=env_file, override=False)


@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_skips_missing_file(mock_find_root, mock_load_dotenv, tmp_path: Path, monkeypatch):
    monkeypatch.delenv("MARGINIQ_ENV_FILE", raising=False)
    mock_find_root.return_value = tmp_path

    assert load_project_dotenv() is False
    mock_load_dotenv.assert_not_called()


def test_load_does_not_override_process_environment(tmp_path: Path, monkeypatch):
    """Variables already set win over the .env file; new ones are added."""
    env_file = tmp_path / "override.env"
    env_file.write_text("MARGINIQ_MODEL=gpt-from-file\nMARGINIQ_TEST_ONLY=loaded\n")
    monkeypatch.setenv("MARGINIQ_ENV_FILE", str(env_file))
    monkeypatch.setenv("MARGINIQ_MODEL", "gpt-from-process")
    monkeypatch.delenv("MARGINIQ_TEST_ONLY", raising=False)

    try:
        assert load_project_dotenv() is True
        assert os.environ["MARGINIQ_MODEL"] == "gpt-from-process"
        assert os.environ["MARGINIQ_TEST_ONLY"] == "loaded"
    finally:
        os.environ.pop("MARGINIQ_TEST_ONLY", None)
