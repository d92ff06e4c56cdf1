import logging
import sys


def configure_logging(level="INFO") -> None:
    """
    Configure logging for the whole app.
    Called once from create_app(); scripts may call it before using the store.
    """
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
