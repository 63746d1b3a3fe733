import pytest

from ddns_cache.cache import CacheStore
from ddns_cache.models import ResolveResult


class FakeResolver:
    """Resolver stand-in that records every hostname it is asked for."""

    def __init__(self, address: str = "", ok: bool = True, error: str = "Name or service not known"):
        self.address = address
        self.ok = ok
        self.error = error
        self.calls = []

    def resolve(self, hostname):
        self.calls.append(hostname)
        if self.ok:
            return ResolveResult(address=self.address, ok=True)
        return ResolveResult(ok=False, error=self.error)


@pytest.fixture
def store(tmp_path):
    return CacheStore(cache_dir=tmp_path, timestamp_mode="mtime")

@pytest.fixture
def legacy_file(tmp_path):
    """Path of the legacy shared cache file used by the `store` fixture."""
    return tmp_path / "ddns.legacy"
