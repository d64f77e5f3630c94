""" Environment-driven settings for kernelwire, plus the logging setup that
    goes with them. Nothing here is read from disk; the connection file and
    everything else involved in starting a kernel belongs to the caller.
"""

import logging
import os
import sys


json_variable = 'KERNELWIRE_JSON'
debug_variable = 'KERNELWIRE_DEBUG'

json_backends = ('msgspec', 'orjson', 'json')
truthy = ('1', 'true', 'yes', 'on')

logger_name = 'kernelwire'


def json_backend(environ=None):
    """ Return the JSON backend requested via the environment, or None if
        the fastest available backend should be chosen automatically.
    """

    if environ is None:
        environ = os.environ

    requested = environ.get(json_variable, '').strip().lower()

    if requested == '':
        return None

    if requested not in json_backends:
        raise ValueError('unknown %s backend: %r' % (json_variable, requested))

    return requested


def debug_enabled(environ=None):
    """ Return True if verbose logging was requested via the environment.
    """

    if environ is None:
        environ = os.environ

    value = environ.get(debug_variable, '')
    return value.strip().lower() in truthy


def setup_logging(debug=None, stream=None):
    """ Configure the top-level kernelwire logger. With *debug* enabled all
        messages are written to *stream* (stderr by default); otherwise the
        logger discards everything. If *debug* is None the environment is
        consulted. Calling this more than once replaces, rather than stacks,
        the handler installed by a previous call.
    """

    if debug is None:
        debug = debug_enabled()

    logger = logging.getLogger(logger_name)

    for handler in list(logger.handlers):
        if getattr(handler, '_kernelwire', False):
            logger.removeHandler(handler)

    if debug:
        if stream is None:
            stream = sys.stderr
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter('%(asctime)s %(name)s %(levelname)s: %(message)s'))
        logger.setLevel(logging.DEBUG)
    else:
        handler = logging.NullHandler()
        logger.setLevel(logging.WARNING)

    handler._kernelwire = True
    logger.addHandler(handler)

    return logger


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
