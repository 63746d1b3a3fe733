# --- Standard library imports ---
import os
from pathlib import Path

# --- Third-party imports ---
from dotenv import load_dotenv


# Load .env once
load_dotenv()

def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"

class Config:
    """Centralized config for cache layout, resolver and observability policy"""

    # --- Cache Layout ---
    CACHE_DIR = Path(
        os.getenv("CACHE_DIR", str(Path.home() / ".cache" / "ddns_cache"))
    ).expanduser()
    CACHE_FILE_TEMPLATE = os.getenv("CACHE_FILE_TEMPLATE", "{name}.cache")
    LEGACY_CACHE_FILE = Path(
        os.getenv("LEGACY_CACHE_FILE", str(CACHE_DIR / "ddns.legacy"))
    ).expanduser()

    # "mtime" keeps the record a bare address; "inline" adds an epoch line
    CACHE_TIMESTAMP_MODE = os.getenv("CACHE_TIMESTAMP_MODE", "mtime").lower()

    # --- Seeding Policy ---
    VALIDATE_CACHED_ADDRESS = _env_flag("VALIDATE_CACHED_ADDRESS", "true")
    RESET_RESOLVER_CACHE = _env_flag("RESET_RESOLVER_CACHE", "true")

    # Format: provider:host1,host2;provider2:host3
    DDNS_PROVIDERS = os.getenv("DDNS_PROVIDERS", "")

    # --- Resolver Policy ---
    RESOLVER = os.getenv("RESOLVER", "system").lower()
    DOH_URL = os.getenv("DOH_URL", "https://cloudflare-dns.com/dns-query")

    # --- Network Policy ---
    try:
        API_TIMEOUT = int(os.getenv("API_TIMEOUT", 8))
    except ValueError:
        API_TIMEOUT = 8

    # --- Observability Policy ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_TIMING = _env_flag("LOG_TIMING", "false")
