import logging
import sys
from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname

        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def _is_compass_handler(handler: logging.Handler) -> bool:
    return getattr(handler, "_compass_handler", False)


def setup_logging(log_level_str: str = "INFO", json_output: bool = True) -> logging.Logger:
    """
    Configures logging for the compass on the root logger.

    JSON records (python-json-logger) by default, the plain text format
    otherwise. Calling it again replaces the handler it installed earlier
    instead of stacking a second one.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in [h for h in root_logger.handlers if _is_compass_handler(h)]:
        root_logger.removeHandler(handler)

    log_handler = logging.StreamHandler(sys.stderr)
    if json_output:
        log_handler.setFormatter(CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s'))
    else:
        log_handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    log_handler._compass_handler = True
    root_logger.addHandler(log_handler)

    root_logger.debug(f"Logging configured with level: {logging.getLevelName(log_level)}")
    return root_logger
