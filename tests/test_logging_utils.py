"""Tests for kubever.logging_utils — root logging setup."""
import logging
from logging.handlers import RotatingFileHandler

import pytest

from kubever.config import Settings
from kubever.logging_utils import configure_logging


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    before = list(root.handlers)
    yield root
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()


def test_unknown_level_falls_back_to_info(clean_root):
    assert configure_logging(Settings(log_level='CHATTY')) == logging.INFO


def test_debug_level(clean_root):
    assert configure_logging(Settings(log_level='DEBUG')) == logging.DEBUG


def test_rotating_file_handler_attached_once(clean_root, tmp_path):
    log_file = tmp_path / 'kubever.log'
    settings = Settings(log_file=str(log_file), log_backup_count=2)
    configure_logging(settings)
    configure_logging(settings)
    handlers = [h for h in clean_root.handlers if isinstance(h, RotatingFileHandler)]
    assert len(handlers) == 1
    assert handlers[0].backupCount == 2
    logging.getLogger('kubever.test').warning('hello from test')
    handlers[0].flush()
    assert 'kubever.test: hello from test' in log_file.read_text()
