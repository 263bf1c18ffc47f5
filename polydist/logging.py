import logging
import logging.config
import os
from typing import Optional


def get_logging_config(level: Optional[str] = None) -> dict:
    """Get the logging configuration dict for polydist.

    Log records go to stderr; stdout is reserved for measurement output, so
    `polydist measure ... > records.json` stays valid JSON. Child loggers such as
    `polydist.measure` and `polydist.data` propagate to the `polydist` logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
               Defaults to POLYDIST_LOG_LEVEL environment variable or INFO.
    """
    if level is None:
        level = os.environ.get('POLYDIST_LOG_LEVEL', 'INFO')

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            }
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'stream': 'ext://sys.stderr'
            }
        },
        'loggers': {
            'polydist': {
                'level': level.upper(),
                'handlers': ['console'],
                'propagate': False
            }
        }
    }


def configure_logging(level: Optional[str] = None, config: Optional[dict] = None) -> None:
    """Configure polydist logging, from `get_logging_config(level)` unless `config` is given.

    >>> from polydist.logging import configure_logging
    >>> configure_logging(level='DEBUG')
    """
    if config is None:
        config = get_logging_config(level)

    logging.config.dictConfig(config)
