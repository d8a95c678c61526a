import logging
import sys
import time
from functools import wraps


def create_logger(name="default", DEBUG=False, stream=None):
    """Return the logger ``name``, giving it a stream handler the first time

    :param name: name of the logger (usually the module ``__name__``)
    :type name: string
    :param DEBUG: log debug messages too (only applies when the logger is
        first created)
    :type DEBUG: boolean
    :param stream: where records are written, stdout by default
    """
    logger = logging.getLogger(name)
    if len(logger.handlers) == 0:
        stream = sys.stdout if stream is None else stream
        logger.setLevel(logging.DEBUG if DEBUG else logging.INFO)
        handler = logging.StreamHandler(stream)
        handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def is_level_debug(logger):
    return logger.getEffectiveLevel() == logging.DEBUG


def timeit(method):
    """Log the duration of ``method`` when its instance has ``DEBUG`` set"""
    logger = create_logger(method.__module__)

    @wraps(method)
    def timed(*args, **kwargs):
        DEBUG = args[0].DEBUG if len(args) > 0 and hasattr(args[0], "DEBUG") else False
        if DEBUG:
            ts = time.time()
            result = method(*args, **kwargs)
            te = time.time()
            logger.info("%r  %2.2f ms", method.__qualname__, (te - ts) * 1000)
            return result
        else:
            return method(*args, **kwargs)

    return timed
