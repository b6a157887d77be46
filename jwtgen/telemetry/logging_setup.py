import logging
import sys

_handler: logging.StreamHandler | None = None


def setup_logging(level: str = "WARNING") -> None:
    """Send jwtgen diagnostics to the current stderr at `level`."""
    global _handler
    logger = logging.getLogger("jwtgen")
    logger.setLevel(level.upper())
    # replace rather than re-point: setStream() flushes the old stream, which may be closed
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(_handler)
