import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_handler = None


def setup_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the root logger."""
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.root.addHandler(_handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
