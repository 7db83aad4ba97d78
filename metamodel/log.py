import logging
import os

import sqlparse

log_format = '[metamodel] %(message)s'

logging.basicConfig(format=log_format)

logger = logging.getLogger('metamodel')

if 'METAMODEL_DEBUG' in os.environ:
    logger.setLevel(logging.INFO)


def log_query(query):
    """
    Log a SQLAlchemy statement, reindented, when INFO logging is enabled.
    """
    if logger.isEnabledFor(logging.INFO):
        logger.info(sqlparse.format(str(query), reindent=True, keyword_case='upper'))
