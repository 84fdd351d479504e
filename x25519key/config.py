"""Settings for x25519key, read from the environment."""

# Standard lib
import logging
import os

SUITE_ID = 'X25519KeyAgreementKey2019'
SECURITY_CONTEXT_URL = 'https://w3id.org/security/v2'

# Unset means log to stderr
LOG_FILE = os.getenv('LOG_FILE')
# `logging` module has constants for each log level. Get them based on env var
LOG_LEVEL = getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO)
LOG_FORMAT = '[%(asctime)s] %(module)s:%(funcName)s %(levelname)s: %(message)s'


def configure_logging(level=None, filename=None):
    """Configure the root logger.

    Only entry points call this; importing the library leaves logging alone.

    Keyword arguments:
    level -- a `logging` level, overrides LOG_LEVEL
    filename -- a log file path, overrides LOG_FILE
    """

    logging.basicConfig(
        filename=filename or LOG_FILE,
        format=LOG_FORMAT,
        level=LOG_LEVEL if level is None else level)
