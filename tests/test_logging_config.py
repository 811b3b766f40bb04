import logging

from expense_dashboard import logging_config


def test_configure_logging_sets_package_level():
    logging_config.configure_logging(level='debug', json_output=True, force=True)

    assert logging.getLogger('expense_dashboard').level == logging.DEBUG
    logger = logging_config.get_logger('expense_dashboard.tests')
    logger.info('configured', check=True)


def test_configure_logging_is_idempotent(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config, '_CONFIGURED', True)
    monkeypatch.setattr(logging_config.structlog, 'configure', lambda **kwargs: calls.append(kwargs))

    logging_config.configure_logging()

    assert calls == []
