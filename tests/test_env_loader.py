import os
from pathlib import Path

import pytest

from envlayer.config import EnvLoader
from envlayer.exceptions import FileAccessError, ParseError


def test_parse_does_not_touch_environ(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("ENVLAYER_FOO=file\n")

    values = EnvLoader().parse(env_file)

    assert values == {"ENVLAYER_FOO": "file"}
    assert "ENVLAYER_FOO" not in os.environ


def test_parse_syntax(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "\n"
        "export EXPORTED=yes\n"
        "QUOTED=\"two words\"\n"
        "SINGLE='raw $VALUE'\n"
        "EMPTY=\n"
        "BARE\n"
        "WITH_COMMENT=value # trailing\n"
    )

    values = EnvLoader().parse(env_file)

    assert values == {
        "EXPORTED": "yes",
        "QUOTED": "two words",
        "SINGLE": "raw $VALUE",
        "EMPTY": "",
        "WITH_COMMENT": "value",
    }


def test_parse_interpolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVLAYER_HOME", "/srv")
    env_file = tmp_path / ".env"
    env_file.write_text("DATA=${ENVLAYER_HOME}/data\nLOGS=${DATA}/logs\n")

    values = EnvLoader().parse(env_file)

    assert values["DATA"] == "/srv/data"
    assert values["LOGS"] == "/srv/data/logs"


def test_parse_error_reports_lines(tmp_path: Path) -> None:
    env_file = tmp_path / "bad.env"
    env_file.write_text("GOOD=1\n\nnot a statement\nALSO_GOOD=2\n")

    with pytest.raises(ParseError) as exc_info:
        EnvLoader().parse(env_file)

    assert exc_info.value.lines == [3]
    assert exc_info.value.details["path"] == str(env_file)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError) as exc_info:
        EnvLoader().parse(tmp_path / "nope.env")

    assert exc_info.value.code == "ENV_FILE_NOT_FOUND"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_apply_does_not_override(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("FOO=file\nBAR=file\n")
    target = {"BAR": "env"}

    added = EnvLoader().apply(env_file, environ=target)

    assert added == {"FOO": "file"}
    assert target == {"FOO": "file", "BAR": "env"}


def test_apply_first_file_wins(tmp_path: Path) -> None:
    first = tmp_path / "first.env"
    first.write_text("K=first\n")
    second = tmp_path / "second.env"
    second.write_text("K=second\n")
    target: dict = {}

    loader = EnvLoader()
    loader.apply(first, environ=target)
    loader.apply(second, environ=target)

    assert target["K"] == "first"


def test_apply_default_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("ENVLAYER_DEFAULT=1\n")

    EnvLoader().apply()

    assert os.environ["ENVLAYER_DEFAULT"] == "1"


def test_apply_explicit_default_file(tmp_path: Path) -> None:
    custom = tmp_path / "config" / "app.env"
    custom.parent.mkdir()
    custom.write_text("ENVLAYER_CUSTOM=1\n")

    loader = EnvLoader(custom)

    assert loader.default_path() == custom
    assert loader.apply() == {"ENVLAYER_CUSTOM": "1"}
