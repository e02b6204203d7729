import logging
import re

_API_KEY_RE = re.compile(r"(api_key=)[^&#\s]*")


def logger_setup(logger_name="congressgov_client", log_level=logging.INFO, propagate=False):
    """
    Set up and return a logger with the specified name and level.
    Avoids affecting the root logger by setting propagate to False.

    Args:
        logger_name (str): The name of the logger.
        log_level (int): The logging level (e.g., logging.INFO, logging.DEBUG).
        propagate (bool): Whether records also reach ancestor loggers.

    Returns:
        logger (logging.Logger): Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Avoid adding duplicate handlers if already set up
    if not logger.hasHandlers():
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s - raised_by: %(name)s',
            datefmt='%Y-%m-%d %H:%M:%S'
            )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)
    logger.propagate = propagate

    return logger


def redact_api_key(url):
    """Mask the api_key query value so URLs can be logged."""
    if not url:
        return url
    return _API_KEY_RE.sub(r"\1***", url)
