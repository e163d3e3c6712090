import logging
from rich.logging import RichHandler
from yt_captions.config import settings

PACKAGE_NAME = __name__.split(".")[0]

def setup_logger(name: str = PACKAGE_NAME) -> logging.Logger:
    """Attach a rich handler to the package logger once; the root logger is left alone."""
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(rich_tracebacks=True, log_time_format="[%X]")
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)
        log.propagate = False
    return log

logger = setup_logger()
