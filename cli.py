import dataclasses as dc
from pathlib import Path
from typing import Annotated, ClassVar

from cyclopts import App, Group, Parameter
from loguru import logger
from rich.table import Table

from filesize import UNIT_TABLE, FileSize, FileSizeError, SizeConfig
from filesize.scale import factor_between
from filesize.size import format_number
from filesize.utils import cnsl, set_logger

app = App(help_format='markdown')
app.meta.group_parameters = Group('Options', sort_key=0)

Sizes = Annotated[str, Parameter(allow_leading_hyphen=True)]
Base = Annotated[int | None, Parameter(name=['--base', '-b'])]
Mark = Annotated[str | None, Parameter(name=['--decimal-mark', '-m'])]


class Settings:
    CONFIG: ClassVar[SizeConfig] = SizeConfig()

    @classmethod
    def resolve(
        cls,
        base: int | None = None,
        decimal_mark: str | None = None,
        precision: int | None = None,
    ) -> SizeConfig:
        override = {
            'base': base,
            'decimal_mark': decimal_mark,
            'precision': precision,
        }
        return dc.replace(
            cls.CONFIG, **{k: v for k, v in override.items() if v is not None}
        )


def _render(value: int | float, config: SizeConfig) -> str:
    if isinstance(value, int):
        return str(value)

    return format_number(value, config.precision, config.decimal_mark)


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name=['--debug', '-d'], negative=[])] = False,
    conf: Path | None = None,
):
    set_logger(level=10 if debug else 20)

    try:
        Settings.CONFIG = SizeConfig.read(conf)
        logger.debug('config={}', Settings.CONFIG)

        app(tokens)
    except FileSizeError as e:
        logger.error('{}: {}', type(e).__name__, e)
        raise SystemExit(1) from e


@app.command(group='Size')
def auto(
    *sizes: Sizes,
    precision: int | None = None,
    base: Base = None,
    decimal_mark: Mark = None,
):
    """
    크기 합계를 적절한 단위로 출력.

    Parameters
    ----------
    sizes : str
        "100 MB", "1.5GiB", "300K", ...
    precision : int | None, optional
        소수점 자릿수.
    base : int | None, optional
        2 (1024) 또는 10 (1000).
    decimal_mark : str | None, optional
        소수점 기호.
    """
    config = Settings.resolve(base, decimal_mark, precision)
    size = FileSize.from_config(list(sizes), config)

    logger.debug('{!r}', size)
    cnsl.print(size.as_auto())


@app.command(group='Size')
def convert(
    *sizes: Sizes,
    unit: Annotated[str, Parameter(name=['--unit', '-u'])] = 'B',
    precision: int | None = None,
    base: Base = None,
    decimal_mark: Mark = None,
):
    """크기 합계를 지정 단위로 변환."""
    config = Settings.resolve(base, decimal_mark, precision)
    size = FileSize.from_config(list(sizes), config)

    value = size.as_unit(unit, config.precision)
    cnsl.print(_render(value, config))


@app.command(group='Size')
def calc(  # noqa: PLR0913
    size: Sizes,
    *,
    add: list[str] | None = None,
    subtract: list[str] | None = None,
    multiply: float | None = None,
    divide: float | None = None,
    unit: str | None = None,
    precision: int | None = None,
    base: Base = None,
    decimal_mark: Mark = None,
):
    """
    크기 연산 (add -> subtract -> multiply -> divide 순서).

    Parameters
    ----------
    size : str
        초기 크기.
    add : list[str] | None, optional
        더할 크기.
    subtract : list[str] | None, optional
        뺄 크기. 결과가 음수일 수 있음.
    multiply : float | None, optional
        곱할 수.
    divide : float | None, optional
        나눌 수.
    unit : str | None, optional
        출력 단위. 미입력 시 자동 선택.
    """
    config = Settings.resolve(base, decimal_mark, precision)
    fs = FileSize.from_config(size, config)

    if add:
        fs.add(add)
    if subtract:
        fs.subtract(subtract)
    if multiply is not None:
        fs.multiply_by(multiply)
    if divide is not None:
        fs.divide_by(divide)

    logger.debug('{!r}', fs)

    if unit is None:
        cnsl.print(fs.as_auto())
    else:
        value = fs.as_unit(unit)
        cnsl.print(_render(value, config))


def unit_table(base: int = 2) -> Table:
    table = Table('Index', 'Unit', 'Aliases', 'Bytes')

    for index, tier in enumerate(UNIT_TABLE):
        table.add_row(
            str(index),
            tier.key,
            ', '.join(sorted(tier.aliases, key=lambda x: (len(x), x))),
            f'{factor_between(index, base):,}',
        )

    return table


@app.command
def units(base: Base = None):
    """단위 목록 및 바이트 환산."""
    config = Settings.resolve(base=base)
    cnsl.print(unit_table(config.base))


def main():
    app.meta()


if __name__ == '__main__':
    main()
