import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Apply ``level`` to the root logger.

    Route modules call ``logging.basicConfig`` on import, which attaches a
    handler at INFO; a later basicConfig would be ignored, so the level is
    set on the root logger directly and a handler is added only if none exists.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(handler)
