import pytest
from loguru import logger


@pytest.fixture
def messages():
    records: list[str] = []

    logger.enable('filesize')
    handler = logger.add(records.append, level='TRACE', format='{message}')

    yield records

    logger.remove(handler)
    logger.disable('filesize')
