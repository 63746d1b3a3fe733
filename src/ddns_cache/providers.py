# --- Standard library imports ---
from dataclasses import dataclass
from typing import Optional

# --- Project imports ---
from .config import Config
from .errors import ConfigurationError
from .logger import get_logger
from .models import Alias, DDNSContext, Provider


logger = get_logger("providers")

@dataclass(frozen=True)
class ProviderCapabilities:
    """Capabilities a provider declares when it is registered."""
    supports_hostname_lookup: bool = True

# Providers not listed here get the default capabilities
_REGISTRY: dict[str, ProviderCapabilities] = {}

def register_provider(name: str, supports_hostname_lookup: bool = True) -> None:
    """
    Declare a provider and its capabilities.

    Re-registering a name replaces its capabilities.
    """
    _REGISTRY[name] = ProviderCapabilities(
        supports_hostname_lookup=supports_hostname_lookup
    )

def capabilities_for(name: str) -> ProviderCapabilities:
    return _REGISTRY.get(name, ProviderCapabilities())

def make_provider(name: str, hostnames: list[str]) -> Provider:
    """
    Build a Provider with fresh (empty) aliases and its registered capabilities.
    """
    caps = capabilities_for(name)
    return Provider(
        name=name,
        aliases=[Alias(name=host) for host in hostnames],
        supports_hostname_lookup=caps.supports_hostname_lookup,
    )

# --- Built-in registrations ---
register_provider("default@dyndns.org")
register_provider("default@freedns.afraid.org")
register_provider("default@no-ip.com")
register_provider("default@duckdns.org")
# Tunnel broker updates an endpoint, there is no hostname to resolve
register_provider("ipv6tb@he.net", supports_hostname_lookup=False)


def parse_providers(value: str) -> list[Provider]:
    """
    Parse a provider/alias configuration string.

    Format:
        provider:host1,host2;provider2:host3

    Raises:
        ConfigurationError: On an entry without a provider name or hostnames.
    """
    providers = []

    for entry in value.split(";"):
        entry = entry.strip()
        if not entry:
            continue

        name, sep, hosts = entry.partition(":")
        name = name.strip()
        hostnames = [h.strip() for h in hosts.split(",") if h.strip()]

        if not sep or not name or not hostnames:
            raise ConfigurationError(f"Invalid provider entry: {entry!r}")

        providers.append(make_provider(name, hostnames))

    return providers

def load_context(value: Optional[str] = None) -> DDNSContext:
    """
    Build the DDNSContext from `value` (defaults to Config.DDNS_PROVIDERS).

    Raises:
        ConfigurationError: If the configuration is malformed or empty.
    """
    if value is None:
        value = Config.DDNS_PROVIDERS

    providers = parse_providers(value)
    if not providers:
        raise ConfigurationError("No DDNS providers configured (DDNS_PROVIDERS)")

    logger.debug(
        f"Loaded {len(providers)} provider(s), "
        f"{sum(len(p.aliases) for p in providers)} alias(es)"
    )
    return DDNSContext(providers=providers)
