from loguru import logger

from .config import SizeConfig
from .errors import ConfigError, FileSizeError, ParseError, UnitError
from .parser import ParsedSize, parse
from .size import FileSize
from .units import UNIT_TABLE, UnitResolver, UnitTier

logger.disable(__name__)

__all__ = [
    'UNIT_TABLE',
    'ConfigError',
    'FileSize',
    'FileSizeError',
    'ParseError',
    'ParsedSize',
    'SizeConfig',
    'UnitError',
    'UnitResolver',
    'UnitTier',
    'parse',
]
