"""
Logging configuration for the HostelCare API.
Console output is colored in development and JSON elsewhere; rotating
file handlers are added when LOG_TO_FILE is enabled.
"""

import logging
import logging.config
import os
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from hostelcare.config.settings import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with timestamp, level and request context fields"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['environment'] = settings.ENVIRONMENT

        if hasattr(record, 'request_id'):
            log_record['request_id'] = record.request_id


def build_logging_config() -> Dict[str, Any]:
    """Build the dictConfig for the current settings"""
    console_formatter = 'json' if settings.LOG_JSON else (
        'colored' if settings.is_development() else 'standard'
    )
    handlers: Dict[str, Any] = {
        'console': {
            'level': 'DEBUG' if settings.DEBUG else settings.LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': console_formatter,
        },
    }
    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handlers['file'] = {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(settings.LOG_DIR, 'app.log'),
            'maxBytes': 10485760,  # 10MB
            'backupCount': 10,
            'formatter': 'standard',
            'encoding': 'utf8',
        }
        handlers['json_file'] = {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(settings.LOG_DIR, 'app.json.log'),
            'maxBytes': 10485760,
            'backupCount': 10,
            'formatter': 'json',
            'encoding': 'utf8',
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
            },
            'json': {
                '()': CustomJsonFormatter,
                'format': '%(timestamp)s %(level)s %(logger)s %(message)s'
            },
            'colored': {
                '()': 'colorlog.ColoredFormatter',
                'format': '%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                'log_colors': {
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'red,bg_white',
                }
            }
        },
        'handlers': handlers,
        'loggers': {
            '': {
                'handlers': list(handlers),
                'level': settings.LOG_LEVEL,
            },
            'sqlalchemy.engine': {
                'level': 'WARNING',
            },
            'uvicorn.access': {
                'level': 'WARNING',
            },
        }
    }


def setup_logging() -> logging.Logger:
    """Configure application logging"""
    logging.config.dictConfig(build_logging_config())
    logger = logging.getLogger("hostelcare")
    logger.info(f"Logging initialized with level: {settings.LOG_LEVEL}")
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
