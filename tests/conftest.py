import logging

import pytest

from bootconf import config


@pytest.fixture(autouse=True)
def _fresh_bootstrap():
    root = logging.getLogger()
    level = root.level
    config.reset()
    yield
    config.reset()
    # drop what setup_logging() installed; pytest's capture handlers are subclasses
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def write_config(tmp_path):
    def _write(content, name="config.json"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
