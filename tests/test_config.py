from pathlib import Path

import pytest

from filesize import ConfigError, SizeConfig


def test_default():
    config = SizeConfig()

    assert (config.base, config.decimal_mark, config.precision) == (2, '.', 2)


@pytest.mark.parametrize(
    'kwargs',
    [
        {'base': 8},
        {'base': 1024},
        {'base': True},
        {'decimal_mark': ''},
        {'decimal_mark': '..'},
        {'decimal_mark': 'x'},
        {'decimal_mark': '1'},
        {'decimal_mark': '-'},
        {'decimal_mark': ' '},
        {'precision': -1},
        {'precision': 1.5},
        {'precision': True},
    ],
)
def test_invalid(kwargs):
    with pytest.raises(ConfigError):
        SizeConfig(**kwargs)


def test_read_pyproject(tmp_path: Path):
    path = tmp_path / 'pyproject.toml'
    path.write_text(
        '[project]\nname = "x"\n\n'
        '[tool.filesize]\nbase = 10\ndecimal-mark = ","\n',
        encoding='UTF-8',
    )

    assert SizeConfig.read(path) == SizeConfig(base=10, decimal_mark=',')


def test_read_toml(tmp_path: Path):
    path = tmp_path / 'filesize.toml'
    path.write_text('[filesize]\nprecision = 3\n', encoding='UTF-8')

    assert SizeConfig.read(path) == SizeConfig(precision=3)


def test_read_missing(tmp_path: Path):
    assert SizeConfig.read(tmp_path / 'missing.toml') == SizeConfig()


def test_read_without_table(tmp_path: Path):
    path = tmp_path / 'pyproject.toml'
    path.write_text('[tool.ruff]\nline-length = 88\n', encoding='UTF-8')

    assert SizeConfig.read(path) == SizeConfig()


def test_read_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / 'pyproject.toml').write_text(
        '[tool.filesize]\nbase = 10\n', encoding='UTF-8'
    )
    monkeypatch.chdir(tmp_path)

    assert SizeConfig.read().base == 10


def test_read_unknown_key(tmp_path: Path):
    path = tmp_path / 'filesize.toml'
    path.write_text('[filesize]\nbase = 2\nunits = "SI"\n', encoding='UTF-8')

    with pytest.raises(ConfigError, match='unknown config keys'):
        SizeConfig.read(path)


def test_read_invalid_value(tmp_path: Path):
    path = tmp_path / 'filesize.toml'
    path.write_text('[filesize]\nbase = 16\n', encoding='UTF-8')

    with pytest.raises(ConfigError, match='base must be 2 or 10'):
        SizeConfig.read(path)


def test_read_invalid_toml(tmp_path: Path):
    path = tmp_path / 'filesize.toml'
    path.write_text('[filesize\nbase = 2\n', encoding='UTF-8')

    with pytest.raises(ConfigError, match='invalid toml'):
        SizeConfig.read(path)
