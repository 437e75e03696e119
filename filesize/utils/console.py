from logging import LogRecord
from pathlib import Path
from typing import ClassVar

import rich
from loguru import logger
from rich.highlighter import ReprHighlighter
from rich.logging import RichHandler
from rich.theme import Theme


class SizeHighlighter(ReprHighlighter):
    highlights = [  # noqa: RUF012
        *ReprHighlighter.highlights,
        r'(?P<size>-?[\d.,]+ ?(?i:[kmgtpezy]i?)?B)\b',
        r'(?P<vb>\|)',
    ]


class _RichHandler(RichHandler):
    LEVELS: ClassVar[dict[str, int]] = {
        'TRACE': 5,
        'DEBUG': 10,
        'INFO': 20,
        'SUCCESS': 25,
        'WARNING': 30,
        'ERROR': 40,
        'CRITICAL': 50,
    }
    _NEW_LVLS: ClassVar[dict[int, str]] = {5: 'TRACE', 25: 'SUCCESS'}

    def emit(self, record: LogRecord) -> None:
        if name := self._NEW_LVLS.get(record.levelno, None):
            record.levelname = name

        return super().emit(record)


cnsl = rich.get_console()
cnsl.push_theme(
    Theme({
        'logging.level.success': 'blue',
        'repr.size': 'bold cyan',
        'repr.vb': 'bold blue',
    })
)


def level_no(level: int | str) -> int:
    if isinstance(level, int):
        return level

    try:
        return _RichHandler.LEVELS[level.upper()]
    except KeyError as e:
        msg = f'`{level}` not in {list(_RichHandler.LEVELS.keys())}'
        raise KeyError(msg) from e


def set_logger(
    level: int | str = 20,
    *,
    log: str | Path | None = None,
    rich_tracebacks=False,
    **kwargs,
):
    level = level_no(level)

    logger.remove()
    logger.enable('filesize')

    _handler = _RichHandler(
        console=cnsl,
        highlighter=SizeHighlighter(),
        markup=True,
        log_time_format='[%X]',
        rich_tracebacks=rich_tracebacks,
    )
    logger.add(_handler, level=level, format='{message}', **kwargs)

    if log is not None:
        logger.add(
            log,
            level=min(20, level),
            rotation='1 month',
            retention='1 year',
            encoding='UTF-8-SIG',
        )

    return level
