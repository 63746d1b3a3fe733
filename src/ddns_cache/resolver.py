# --- Standard library imports ---
import ctypes
import ctypes.util
import socket
from typing import Optional

# --- Third-party imports ---
import requests

# --- Project imports ---
from .config import Config
from .errors import ConfigurationError, ResolutionError
from .logger import get_logger
from .models import ResolveResult


# Define the logger once for the entire module
logger = get_logger("resolver")

class Resolver:
    """
    Hostname → numeric address adapter.

    Subclasses implement `_lookup()` and raise ResolutionError on failure;
    `resolve()` never raises. No retries, no timeout beyond the backend's own.
    """

    def resolve(self, hostname: str) -> ResolveResult:
        try:
            address = self._lookup(hostname)
        except ResolutionError as e:
            logger.warning(f"Failed resolving hostname {hostname}: {e}")
            return ResolveResult(ok=False, error=str(e))

        logger.info(f"Resolving hostname {hostname} → IP# {address}")
        return ResolveResult(address=address, ok=True)

    def _lookup(self, hostname: str) -> str:
        raise NotImplementedError


class SystemResolver(Resolver):
    """IPv4 lookup through the system resolver (getaddrinfo/getnameinfo)."""

    def _lookup(self, hostname: str) -> str:
        try:
            infos = socket.getaddrinfo(
                hostname, None, socket.AF_INET, socket.SOCK_DGRAM
            )
            if not infos:
                raise ResolutionError("no address records")

            sockaddr = infos[0][4]
            host, _ = socket.getnameinfo(sockaddr, socket.NI_NUMERICHOST)
            return host
        except socket.gaierror as e:
            raise ResolutionError(e.strerror or str(e)) from e
        except (OSError, UnicodeError) as e:
            raise ResolutionError(str(e)) from e


class DohResolver(Resolver):
    """
    IPv4 lookup via DNS-over-HTTPS (JSON API).

    Bypasses any local name-service cache entirely.
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[int] = None):
        self.url = url or Config.DOH_URL
        self.timeout = timeout if timeout is not None else Config.API_TIMEOUT

    def _lookup(self, hostname: str) -> str:
        params = {"name": hostname, "type": "A"}
        headers = {"Accept": "application/dns-json"}

        try:
            resp = requests.get(
                self.url,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            answers = resp.json().get("Answer") or []
        except requests.RequestException as e:
            raise ResolutionError(
                f"DoH request failed ({e.__class__.__name__})"
            ) from e
        except ValueError as e:
            raise ResolutionError("DoH response was not valid JSON") from e

        # Answer may include CNAME hops (type 5) before the A record (type 1)
        for answer in answers:
            if answer.get("type") == 1 and answer.get("data"):
                return answer["data"]

        raise ResolutionError("no A-record returned")


RESOLVERS = {
    "system": SystemResolver,
    "doh": DohResolver,
}

def get_resolver(kind: Optional[str] = None) -> Resolver:
    """
    Return a resolver backend by name (defaults to Config.RESOLVER).

    Raises:
        ConfigurationError: For an unknown backend name.
    """
    kind = (kind or Config.RESOLVER).lower()
    try:
        return RESOLVERS[kind]()
    except KeyError:
        raise ConfigurationError(f"Unknown resolver backend: {kind!r}") from None


def reset_resolver_cache() -> bool:
    """
    Re-initialise the C library resolver state before seeding lookups.

    Stale answers from a long-lived process or a local name-service cache
    are a known problem for DDNS clients. Best-effort only.

    Returns:
        True if a reset call was issued, False otherwise.
    """
    libc_name = ctypes.util.find_library("c")
    if not libc_name:
        logger.debug("No C library found, resolver reset skipped")
        return False

    try:
        libc = ctypes.CDLL(libc_name)
    except OSError as e:
        logger.debug(f"Could not load {libc_name}: {e}")
        return False

    # glibc exports res_init as __res_init
    for symbol in ("__res_init", "res_init"):
        func = getattr(libc, symbol, None)
        if func is None:
            continue
        rc = func()
        logger.debug(f"Resolver state re-initialised ({symbol} → {rc})")
        return rc == 0

    logger.debug("Resolver reset unsupported on this platform")
    return False
