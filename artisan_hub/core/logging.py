# artisan_hub/core/logging.py
import logging
import sys
import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s"

# Third-party loggers kept at WARNING whatever the app level
QUIET_LOGGERS = ("pymongo", "httpx", "httpcore", "openai", "PIL", "multipart")


def configure_logging(level=logging.INFO, *, use_color: bool | None = None):
    """
    Route every logger to stdout through a single colorlog handler.
    Colors are dropped automatically when stdout is not a terminal (Render, Docker logs).
    """
    if use_color is None:
        use_color = sys.stdout.isatty()

    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            LOG_FORMAT,
            datefmt="%H:%M:%S",
            no_color=not use_color,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
