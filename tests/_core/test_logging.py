import logging

import pytest

from pcjson._core.environment import settings
from pcjson._core.error import TrailingInputError
from pcjson._core.logging import (
    DEFAULT_LOG_LEVEL,
    RichLogger,
    _log_stats,
    configure_logging,
    get_logger,
    log_summary,
)
from pcjson._core.parsers.json_parser import parse_json


@pytest.fixture(autouse=True)
def reset_logging_state(monkeypatch):
    """Resets the global state of the logging module before each test."""
    _log_stats.clear()
    monkeypatch.setattr('pcjson._core.logging._logging_configured', False)
    yield
    _log_stats.clear()
    monkeypatch.setattr('pcjson._core.logging._logging_configured', False)
    logging.getLogger().handlers.clear()


def test_basic_logging_levels_and_stats(capsys):
    """
    Tests that basic logging calls are emitted and that stats are tracked correctly.
    """
    logger = get_logger('test_logger')
    configure_logging(level='DEBUG', use_rich=False, force=True)

    logger.debug('debug message')
    logger.info('info message')
    logger.warning('warn message')
    logger.error('error message')

    captured = capsys.readouterr().err
    assert 'debug message' in captured
    assert 'info message' in captured
    assert 'warn message' in captured
    assert 'error message' in captured

    stats = _log_stats.get('test_logger', {})
    assert stats.get('DEBUG') == 1
    assert stats.get('INFO') == 1
    assert stats.get('WARNING') == 1
    assert stats.get('ERROR') == 1
    assert stats.get('CRITICAL') == 0


def test_get_logger_returns_rich_logger():
    assert isinstance(get_logger('rich_logger_check'), RichLogger)


def test_log_performance_message_format(capsys):
    logger = get_logger('perf_logger')
    configure_logging(level='INFO', use_rich=False, force=True)

    logger.log_performance('my_operation', 1.2345, chars=100)
    captured = capsys.readouterr().err

    assert 'my_operation' in captured
    assert 'Duration: 1.2345s' in captured
    assert 'chars=100' in captured


def test_configure_logging_force_reconfigures(monkeypatch):
    monkeypatch.setattr(settings, 'log_level', DEFAULT_LOG_LEVEL)
    _ = get_logger('reconfig_test')
    assert logging.getLogger().level == logging.getLevelName(DEFAULT_LOG_LEVEL)

    configure_logging(level='DEBUG', force=True)
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_without_force_is_noop():
    configure_logging(level='WARNING', use_rich=False, force=True)
    configure_logging(level='DEBUG', use_rich=False)
    assert logging.getLogger().level == logging.WARNING


def test_rich_handler_is_installed_when_requested():
    configure_logging(level='INFO', use_rich=True, force=True)
    handler_types = {type(h).__name__ for h in logging.getLogger().handlers}
    assert 'RichHandler' in handler_types


def test_custom_format_string(capsys):
    logger = get_logger('format_logger')
    configure_logging(
        level='INFO', use_rich=False, format_string='FMT %(message)s', force=True
    )
    logger.info('hello')
    assert 'FMT hello' in capsys.readouterr().err


def test_file_logging(tmp_path):
    log_file = tmp_path / 'logs' / 'pcjson.log'
    logger = get_logger('file_logger')
    configure_logging(
        level='INFO', use_rich=False, file_path=str(log_file), force=True
    )

    logger.info('written to file')
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert 'written to file' in log_file.read_text()


def test_log_summary_reports_counts(capsys):
    logger = get_logger('summary_logger')
    configure_logging(level='INFO', use_rich=False, force=True)
    logger.info('one')
    logger.warning('two')

    log_summary()
    captured = capsys.readouterr().err
    assert "Logger 'summary_logger': 2 messages" in captured
    assert '--- Logging Summary ---' in captured


def test_parse_failures_are_logged_at_debug(capsys):
    configure_logging(level='DEBUG', use_rich=False, force=True)

    with pytest.raises(TrailingInputError):
        parse_json('42 abc')

    captured = capsys.readouterr().err
    assert 'Parsing JSON input (6 chars)' in captured
    assert "Trailing input after JSON value: 'abc'" in captured


def test_debug_setting_logs_parse_performance(capsys, monkeypatch):
    monkeypatch.setattr(settings, 'debug', True)
    configure_logging(level='DEBUG', use_rich=False, force=True)

    assert parse_json('[1, 2]') == [1, 2]

    captured = capsys.readouterr().err
    assert '⚡ Performance | parse_json' in captured
    assert 'chars=6' in captured
