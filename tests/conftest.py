import pytest

from arrayrunner.logger import set_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    set_logger(None)
