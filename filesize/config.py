from __future__ import annotations

import dataclasses as dc
import tomllib
from pathlib import Path

from filesize.errors import ConfigError
from filesize.scale import EXPONENT


@dc.dataclass(frozen=True)
class SizeConfig:
    base: int = 2
    decimal_mark: str = '.'
    precision: int = 2

    def __post_init__(self):
        if isinstance(self.base, bool) or self.base not in EXPONENT:
            raise ConfigError(self.base, 'base must be 2 or 10')

        mark = self.decimal_mark
        if (
            not isinstance(mark, str)
            or len(mark) != 1
            or mark.isalnum()
            or mark.isspace()
            or mark in '+-'
        ):
            raise ConfigError(mark, 'decimal mark must be a single symbol')

        if (
            isinstance(self.precision, bool)
            or not isinstance(self.precision, int)
            or self.precision < 0
        ):
            raise ConfigError(self.precision, 'precision must be a non-negative int')

    @staticmethod
    def table(text: str) -> dict | None:
        config = tomllib.loads(text)

        try:
            return config['tool']['filesize']  # pyproject.toml
        except KeyError:
            pass

        return config.get('filesize')  # filesize.toml

    @classmethod
    def read(cls, path: str | Path | None = None):
        if path is None:
            path = Path.cwd() / 'pyproject.toml'

        path = Path(path)
        if not path.exists():
            return cls()

        try:
            conf = cls.table(path.read_text('UTF-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(str(path), 'invalid toml') from e

        if not conf:
            return cls()

        fields = {x.name for x in dc.fields(cls)}
        kwargs = {k.replace('-', '_'): v for k, v in conf.items()}
        if unknown := set(kwargs) - fields:
            raise ConfigError(sorted(unknown), 'unknown config keys')

        return cls(**kwargs)
