# --- Standard library imports ---
import time
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Alias:
    """
    A single hostname kept in sync with a DDNS provider.

    `address` and `last_update` move together: the only writers are
    `reset()`, the seeding pass and `CacheStore.commit()`.
    `last_update` is epoch seconds, 0 meaning "unknown".
    """
    name: str
    address: str = ""
    last_update: int = 0

    def reset(self) -> None:
        self.address = ""
        self.last_update = 0

    def seconds_since_update(self, now: Optional[float] = None) -> Optional[int]:
        """
        Staleness as seen by the update scheduler.

        Returns:
            Whole seconds since the last confirmed update, or None when
            the update instant is unknown.
        """
        if not self.last_update:
            return None
        if now is None:
            now = time.time()
        return max(0, int(now) - self.last_update)


@dataclass
class Provider:
    """
    A DDNS update service grouping one or more aliases.

    `supports_hostname_lookup` is declared when the provider is
    registered (see providers.register_provider) and read by seeding.
    """
    name: str
    aliases: list[Alias] = field(default_factory=list)
    supports_hostname_lookup: bool = True


@dataclass(frozen=True)
class CacheRecord:
    """Result of a cache load; zero values mean "not obtained"."""
    address: str = ""
    last_update: int = 0
    found: bool = False


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of a hostname lookup."""
    address: str = ""
    ok: bool = False
    error: Optional[str] = None


@dataclass
class DDNSContext:
    """Top-level configuration context handed to the seeding pass."""
    providers: list[Provider] = field(default_factory=list)

    def aliases(self):
        for provider in self.providers:
            yield from provider.aliases
