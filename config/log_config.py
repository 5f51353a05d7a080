"""
Logging configuration for the Task Manager API.

Returns a dictConfig for Django's LOGGING setting. Everything goes to stderr
so the same config works under runserver, uvicorn and Lambda/CloudWatch.
"""
import os


def get_logging_config(level: str = None) -> dict:
    """
    Returns the LOGGING dict.

    The level comes from LOG_LEVEL unless passed explicitly. App loggers
    (apps.*) follow it; Django's own loggers stay at WARNING so request
    logging is not duplicated by django.server.
    """
    level = (level or os.getenv('LOG_LEVEL', 'INFO')).upper()

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
            },
        },
        'loggers': {
            'apps': {
                'handlers': ['console'],
                'level': level,
                'propagate': False,
            },
            'django': {
                'handlers': ['console'],
                'level': 'WARNING',
                'propagate': False,
            },
        },
        'root': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    }
