import logging
import logging.config

# Format for messages printed to console
SIGPREP_LOG_CONSOLE_FORMAT = '[%(name)s %(levelname)s] %(message)s'

# Logging level for console
SIGPREP_LOG_CONSOLE_LEVEL = 'DEBUG'

# Level for the `sigprep` logger hierarchy
SIGPREP_LOG_LEVEL = 'INFO'

# if logging is already set up, don't set it up again.
x = logging.getLogger()
if len(x.handlers)==0:
    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'console': {'format': SIGPREP_LOG_CONSOLE_FORMAT},
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'console',
                'level': SIGPREP_LOG_CONSOLE_LEVEL,
            },
        },
        'loggers': {
            '__main__': {'level': 'INFO'},
            'sigprep': {'level': SIGPREP_LOG_LEVEL},
            'numba': {'level': 'WARNING'},
            'matplotlib': {'level': 'WARNING'},
        },
        'root': {
            'handlers': ['console'],
        },
    }
    logging.config.dictConfig(config)
