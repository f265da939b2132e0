"""
Logging setup for the PrepMind API.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a single console handler.

    Safe to call more than once; existing handlers are replaced so uvicorn
    reloads don't duplicate output.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s - %(message)s'))

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
