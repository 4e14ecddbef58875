import logging

from logger import logger, setup_logger


def console_handlers(log):
    return [handler for handler in log.handlers if type(handler) is logging.StreamHandler]


def test_library_logger_is_named_after_the_project():
    assert logger.name == 'lazystreams'


def test_library_logger_leaves_output_to_the_application():
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)
    assert console_handlers(logger) == []
    assert logger.propagate


def test_setup_logger_with_explicit_level():
    log = setup_logger('lazystreams.test_explicit', level='DEBUG')
    assert log.level == logging.DEBUG
    assert not log.propagate
    assert len(console_handlers(log)) == 1


def test_setup_logger_reads_level_from_environment(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'warning')
    log = setup_logger('lazystreams.test_environment')
    assert log.level == logging.WARNING


def test_setup_logger_configures_only_once():
    first = setup_logger('lazystreams.test_once', level='ERROR')
    second = setup_logger('lazystreams.test_once', level='DEBUG')
    assert first is second
    assert len(console_handlers(second)) == 1
    assert second.level == logging.ERROR
