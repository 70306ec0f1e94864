import json
import logging

from config.logging_config import CustomJsonFormatter, setup_logging


def _compass_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_compass_handler", False)]

def test_setup_logging_sets_level():
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    setup_logging("warning")
    assert logging.getLogger().level == logging.WARNING

def test_setup_logging_unknown_level_defaults_to_info():
    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO

def test_setup_logging_does_not_stack_handlers():
    setup_logging("INFO")
    setup_logging("INFO")
    assert len(_compass_handlers()) == 1

def test_setup_logging_plain_output():
    setup_logging("INFO", json_output=False)
    (handler,) = _compass_handlers()
    assert not isinstance(handler.formatter, CustomJsonFormatter)

def test_json_formatter_fields():
    formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
    record = logging.LogRecord(
        name="services.archetype_engine.engine",
        level=logging.INFO,
        pathname=__file__,
        lineno=42,
        msg="Scored archetype '%s'",
        args=("rocket",),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["message"] == "Scored archetype 'rocket'"
    assert payload["level"] == "INFO"
    assert payload["name"] == "services.archetype_engine.engine"
    assert payload["lineno"] == 42
    assert payload["timestamp"] == record.created
    assert "module" in payload
