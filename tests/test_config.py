import json

import pytest

from dynapork.config import read_config, read_config_from_env, read_config_from_path
from dynapork.errors import ConfigError
from dynapork.types import Credentials


def write_config(tmp_path, payload) -> str:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_reads_credentials_from_file(tmp_path) -> None:
    path = write_config(
        tmp_path,
        {"credentials": {"api_key": "pk1", "api_secret": "sk1"}, "log_level": "debug", "read_timeout": 5},
    )
    config = read_config_from_path(path)
    assert config.credentials == Credentials(api_key="pk1", api_secret="sk1")
    assert config.log_level == "debug"
    assert config.read_timeout == 5.0


def test_reads_credentials_from_env() -> None:
    config = read_config_from_env({"PORKBUN_API_KEY": "pk1", "PORKBUN_SECRET_API_KEY": "sk1"})
    assert config.credentials == Credentials(api_key="pk1", api_secret="sk1")
    assert config.log_level == "info"
    assert config.read_timeout == 60.0


def test_env_overrides_file(tmp_path) -> None:
    path = write_config(tmp_path, {"credentials": {"api_key": "file-key", "api_secret": "file-secret"}})
    config = read_config(path, environ={"PORKBUN_API_KEY": "env-key", "DYNAPORK_READ_TIMEOUT": "2.5"})
    assert config.credentials == Credentials(api_key="env-key", api_secret="file-secret")
    assert config.read_timeout == 2.5


def test_config_path_from_env(tmp_path) -> None:
    path = write_config(tmp_path, {"credentials": {"api_key": "pk1", "api_secret": "sk1"}})
    config = read_config(environ={"DYNAPORK_CONFIG": path})
    assert config.credentials.api_key == "pk1"


def test_missing_credentials_raise() -> None:
    with pytest.raises(ConfigError):
        read_config(environ={"PORKBUN_API_KEY": "pk1"})


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        read_config_from_path(tmp_path / "absent.json")


@pytest.mark.parametrize(
    "content",
    [
        "{broken",
        "[]",
        '{"credentials": "pk1:sk1"}',
        '{"credentials": {"api_key": 1, "api_secret": "sk1"}}',
        '{"credentials": {"api_key": "pk1", "api_secret": "sk1"}, "log_level": "loud"}',
        '{"credentials": {"api_key": "pk1", "api_secret": "sk1"}, "read_timeout": "soon"}',
        '{"credentials": {"api_key": "pk1", "api_secret": "sk1"}, "read_timeout": 0}',
    ],
)
def test_malformed_files_raise(tmp_path, content: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        read_config_from_path(path)


def test_non_utf8_file_raises(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b'{"credentials": "\xff"}')
    with pytest.raises(ConfigError, match="Invalid JSON"):
        read_config_from_path(path)
