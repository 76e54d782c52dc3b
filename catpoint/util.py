# -*- coding: utf-8 -*-

import logging
import types
import sys
from functools import wraps
from threading import Thread


def run_async(func):
    """
    Function decorator that will run the function in a new daemonized thread.
    """

    @wraps(func)
    def async_func(*args, **kwargs):
        func_hl = Thread(target=func, daemon=True, args=args, kwargs=kwargs)
        func_hl.start()
        return func_hl

    return async_func


def str_to_bool(value):
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes", "on")


def getLogger(name=None):
    logger = logging.getLogger(name)

    def fatal(target, msg, *args, **kwargs):
        target.error(msg, *args, **kwargs)
        logging.shutdown()
        sys.exit(-1)

    logger.fatal = types.MethodType(fatal, logger)

    return logger
