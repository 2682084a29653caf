'''
Logging for the calculator's own tracing.

User facing output (the stack, help, parse errors) is printed, not logged.
'''
import logging
import sys


def setup_logging(level=logging.WARNING, stream=None):
    '''
    Configure the 'stackcalc' logger to write to stderr.

    :param level: Logging level (e.g. logging.DEBUG for --verbose).
    :param stream: Where to write instead of stderr.
    '''
    logger = logging.getLogger('stackcalc')
    logger.setLevel(level)

    # Running the CLI twice in one process (tests) mustn't double the output.
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)

    logger.debug('Logging initialized.')
    return logger
