# --- Standard library imports ---
import sys
import logging

# --- Project imports ---
from .config import Config


# --- Custom log levels ---
TIMING = 25   # Between INFO (20) and WARNING (30)
logging.addLevelName(TIMING, "TIME")

def timing(self, message, *args, **kwargs):
    """Add `timing` method to Logger for TIMING-level logs."""
    if self.isEnabledFor(TIMING):
        self._log(TIMING, message, args, stacklevel=2, **kwargs)

logging.Logger.timing = timing

# --- Filters ---
class TimingFilter(logging.Filter):
    """Filter out TIMING logs unless explicitly enabled."""
    def __init__(self, enabled: bool):
        super().__init__()
        self.enabled = enabled

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno == TIMING:
            return self.enabled
        return True

# --- Format configuration constants ---
LOG_LEVEL_EMOJIS = {
    logging.DEBUG: "🧱",
    logging.INFO: "🟢",
    TIMING: "⚡️",
    logging.WARNING: "⚠️ ",
    logging.ERROR: "❌",
    logging.CRITICAL: "🔥",
}

LEVEL_NAME_MAP = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}

NAMESPACE = "ddns_cache"

# --- Formatters ---
class EmojiFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        """
        Formatter that prepends an emoji per log level, shortens level
        names and drops the package prefix from logger names.
        """
        record.levelemoji = LOG_LEVEL_EMOJIS.get(record.levelno, "")
        record.levelname = LEVEL_NAME_MAP.get(record.levelname, record.levelname)
        record.shortname = record.name.removeprefix(f"{NAMESPACE}.")
        return super().format(record)

def resolve_level(level: int | str) -> int:
    """
    Map a level name ("info", "TIME", ...) or number to a logging level.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO

# --- Public logging setup API ---
def setup_logging(level: int | str = logging.INFO, timing_enabled: bool | None = None) -> None:
    """
    Configure global logging with emoji decorations and optional TIMING logs.

    Args:
        level: Root level, as a number or a name such as Config.LOG_LEVEL.
        timing_enabled: Let TIMING records through; defaults to Config.LOG_TIMING.
    """
    if timing_enabled is None:
        timing_enabled = Config.LOG_TIMING

    root = logging.getLogger()
    root.setLevel(resolve_level(level))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = EmojiFormatter(
        fmt="%(asctime)s %(levelemoji)s %(shortname)s:%(funcName)s → %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    handler.addFilter(TimingFilter(enabled=timing_enabled))
    root.addHandler(handler)

def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the package namespace.
    """
    return logging.getLogger(f"{NAMESPACE}.{name}")
