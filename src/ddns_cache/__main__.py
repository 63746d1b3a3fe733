# --- Standard library imports ---
import sys
import time
import logging

# --- Project imports ---
from .config import Config
from .telemetry import alias_state
from .cache import CacheStore
from .seeding import Seeder
from .resolver import get_resolver
from .errors import ConfigurationError
from .providers import load_context
from .logger import get_logger, setup_logging


def report_state(ctx, store: CacheStore, logger: logging.Logger) -> None:
    """
    Log the seeded per-alias state the update scheduler starts from.
    """
    now = time.time()
    for provider in ctx.providers:
        for alias in provider.aliases:
            alias_state(logger, provider.name, alias, store.time, now)

def main() -> int:
    """
    Entry point: seed all configured aliases once and report their state.

    Returns:
        0 on success, 2 on configuration error.
    """

    # Setup logging policy
    setup_logging(level=Config.LOG_LEVEL)
    logger = get_logger("main")
    logger.info("🚀 Seeding DDNS alias cache")
    logger.debug(f"Python version: {sys.version}")

    try:
        ctx = load_context()
        store = CacheStore()
        seeder = Seeder(store=store, resolver=get_resolver())
        seeder.seed_all(ctx)
    except ConfigurationError as e:
        logger.critical(f"Configuration error: {e}")
        return 2

    report_state(ctx, store, logger)
    return 0

if __name__ == "__main__":
    sys.exit(main())
