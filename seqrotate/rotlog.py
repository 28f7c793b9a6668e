import logging
from logging import handlers
from queue import Queue

from seqrotate.constants import APPNAME

__logging_queue = None # type: Queue
__listener = None # type: handlers.QueueListener

def setupLogListener():
    """
    Create the logging queue and the listener that drains it to the
    console. All package loggers feed this single queue.
    """
    global __logging_queue
    global __listener

    q = Queue()

    console_handler = logging.StreamHandler()
    detailed_formatter = logging.Formatter('[{asctime}.{msecs:03.0f}] {name} line {lineno:4d} in {funcName:30}: {message}', datefmt='%H:%M:%S', style='{')

    console_handler.setFormatter(detailed_formatter)

    q_listener = handlers.QueueListener(q, console_handler)

    __logging_queue = q
    __listener = q_listener

    # the package root logger owns the queue handler; module loggers
    # below it propagate their records up to it
    root = logging.getLogger(APPNAME)
    root.addHandler(handlers.QueueHandler(q))
    root.propagate = False

    q_listener.start()

def newLogger(name, level=None):
    """
    Create and return a new logger connected to the main logging queue.

    :param name: Name (preferably of the calling module) that will show in the log records
    :param str level: log message level; if None, the level is
        inherited from the package logger (see :func:`set_level`)
    :return: logger object
    """

    if __listener is None:
        setupLogListener()

    logger = logging.getLogger(name)

    if level is not None:
        try:
            logger.setLevel(level.upper())
        except ValueError:
            pass # let it inherit

    return logger

def set_level(level):
    """
    Set the level of the package root logger, which every logger
    created through :func:`newLogger` inherits unless given its own.

    :param str level: a level name such as "DEBUG" or "warning"
    """
    logging.getLogger(APPNAME).setLevel(level.upper())

def __lshift(caller, value):
    """
    Overload the << op to allow a shortcut to debug() calls:

    logger << "Here's your problem: " + str(thisiswrong)

    ==

    logger.debug("Here's your problem: {}".format(thisiswrong))

    :param value: the message to send
    """
    # stacklevel=2 so the record points at the line using <<
    caller.debug(value, stacklevel=2)

    return caller

# has to be set on the class, not the instance
setattr(logging.Logger , "__lshift__", __lshift)  # add << overload


def start_listener():
    if __listener is None:
        setupLogListener()
    else:
        __listener.start()

def stop_listener():
    if __listener is not None:
        __listener.stop()
