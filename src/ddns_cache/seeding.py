# --- Standard library imports ---
import time
import ipaddress
from dataclasses import dataclass
from typing import Optional

# --- Project imports ---
from .config import Config
from .telemetry import seed_event, seed_summary
from .logger import get_logger
from .cache import CacheStore
from .errors import ConfigurationError
from .models import Alias, DDNSContext, Provider
from .resolver import Resolver, get_resolver, reset_resolver_cache
from .time_service import TimeService


logger = get_logger("seeding")

@dataclass
class SeedReport:
    """Per-pass seeding outcome counts."""
    cached: int = 0
    resolved: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.cached + self.resolved + self.skipped + self.failed


def _validate_context(ctx, store: CacheStore) -> None:
    """
    Structural checks only; any violation aborts the pass before any
    alias is touched.
    """
    if ctx is None:
        raise ConfigurationError("No DDNS context to seed")
    if not isinstance(ctx, DDNSContext):
        raise ConfigurationError(
            f"Expected DDNSContext, got {type(ctx).__name__}"
        )
    if ctx.providers is None:
        raise ConfigurationError("DDNS context has no provider list")

    for provider in ctx.providers:
        if not isinstance(provider, Provider) or provider.aliases is None:
            raise ConfigurationError(f"Invalid provider entry: {provider!r}")
        for alias in provider.aliases:
            if not isinstance(alias, Alias) or not alias.name:
                raise ConfigurationError(
                    f"Invalid alias under provider {provider.name}: {alias!r}"
                )
            if store.collides_with_legacy(alias.name):
                raise ConfigurationError(
                    f"Cache file for {alias.name} would overwrite the legacy cache "
                    f"{store.legacy_path}; change LEGACY_CACHE_FILE or CACHE_FILE_TEMPLATE"
                )

def _is_ip_literal(address: str) -> bool:
    try:
        ipaddress.ip_address(address)
        return True
    except ValueError:
        return False


class Seeder:
    """
    Populates each alias's in-memory address/last_update at startup so
    the first update cycle does not re-publish an unchanged address.

    Per alias, in order:
        1. persisted cache record
        2. live DNS lookup (only for providers supporting hostname lookup)
        3. left empty
    Individual alias failures never abort the pass.
    """

    def __init__(
        self,
        store: Optional[CacheStore] = None,
        resolver: Optional[Resolver] = None,
        validate_cached: Optional[bool] = None,
        time_service: Optional[TimeService] = None,
    ):
        self.store = store or CacheStore()
        self.resolver = resolver or get_resolver()
        self.validate_cached = (
            Config.VALIDATE_CACHED_ADDRESS if validate_cached is None
            else validate_cached
        )
        self.time = time_service or self.store.time

    def seed_all(self, ctx: DDNSContext, reset_resolver: Optional[bool] = None) -> SeedReport:
        """
        Seed every alias of every provider in `ctx`.

        May be called again on reload; each alias is reset first.

        Raises:
            ConfigurationError: If `ctx` is missing or structurally invalid.
        """
        if reset_resolver is None:
            reset_resolver = Config.RESET_RESOLVER_CACHE

        # Purge stale resolver state before any lookup below
        if reset_resolver:
            reset_resolver_cache()

        _validate_context(ctx, self.store)

        start = time.perf_counter()
        self.store.migrate_legacy()

        report = SeedReport()
        for provider in ctx.providers:
            lookup = provider.supports_hostname_lookup
            for alias in provider.aliases:
                outcome = self.seed_one(alias, lookup)
                setattr(report, outcome, getattr(report, outcome) + 1)

        seed_summary(logger, report, (time.perf_counter() - start) * 1000)
        return report

    def seed_one(self, alias: Alias, lookup: bool = True) -> str:
        """
        Seed a single alias.

        Returns:
            One of "cached", "resolved", "skipped", "failed".
        """
        alias.reset()

        record = self.store.load(alias.name)
        if record.found and self.validate_cached and not _is_ip_literal(record.address):
            logger.warning(
                f"Ignoring malformed cached address for {alias.name}: {record.address!r}"
            )
        elif record.found:
            alias.address = record.address
            alias.last_update = record.last_update
            logger.info(f"Cached IP# {record.address} from previous invocation.")
            logger.info(
                f"Last update of {alias.name} on "
                f"{self.time.format_epoch(record.last_update)}"
            )
            seed_event(logger, "cached", alias.name, record.address)
            return "cached"

        if not lookup:
            seed_event(logger, "skipped", alias.name, "no hostname lookup")
            return "skipped"

        result = self.resolver.resolve(alias.name)
        if not result.ok:
            seed_event(logger, "failed", alias.name, result.error)
            return "failed"

        # No cache file: the current address is known, its update instant is not
        alias.address = result.address
        alias.last_update = 0
        seed_event(logger, "resolved", alias.name, result.address)
        return "resolved"


def seed_all(
    ctx: DDNSContext,
    store: Optional[CacheStore] = None,
    resolver: Optional[Resolver] = None,
    reset_resolver: Optional[bool] = None,
) -> SeedReport:
    """
    Seed all aliases in `ctx` from cache or DNS.

    Raises:
        ConfigurationError: If `ctx` is missing or structurally invalid.
    """
    return Seeder(store=store, resolver=resolver).seed_all(ctx, reset_resolver)
