"""
Logger configuration for the statet command line.

Library modules only create loggers with logging.getLogger(__name__);
handlers are attached here, by the application.
"""
import logging

def configure_logging(level: int | str = logging.WARNING,
                      name: str = "statet") -> logging.Logger:
    """
    Sets the level of the statet logger and attaches a single
    message-only StreamHandler to it.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not any(isinstance(handler, logging.StreamHandler)
               for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    logger.propagate = False
    return logger
