# --- Standard library imports ---
import os
import time
from pathlib import Path
from typing import Optional

# --- Project imports ---
from .config import Config
from .errors import ConfigurationError
from .logger import get_logger
from .models import Alias, CacheRecord
from .time_service import TimeService


logger = get_logger("cache")

TIMESTAMP_MODES = ("mtime", "inline")

# 9999-12-31T23:59:59Z, the last instant datetime can represent
MAX_EPOCH = 253402300799

def _parse_epoch(value: str) -> int:
    """
    Inline timestamp as epoch seconds, or 0 when absent, malformed
    or outside the range a datetime can represent.
    """
    try:
        epoch = int(value)
    except ValueError:
        return 0
    return epoch if 0 < epoch <= MAX_EPOCH else 0

class CacheStore:
    """
    File-backed per-alias record of the last published address.

    Layout:
        <cache_dir>/<template % name>   first line:  address
                                        second line: epoch seconds (inline mode only)
        mtime is the last update instant whenever no valid second line exists.

    A legacy single-file cache, shared by all aliases, is consumed at most
    once per store: see migrate_legacy().
    """

    def __init__(
        self,
        cache_dir: Optional[Path] = None,
        template: Optional[str] = None,
        legacy_path: Optional[Path] = None,
        timestamp_mode: Optional[str] = None,
        time_service: Optional[TimeService] = None,
    ):
        self.cache_dir = Path(cache_dir) if cache_dir is not None else Config.CACHE_DIR
        self.template = template or Config.CACHE_FILE_TEMPLATE

        if legacy_path is None:
            legacy_path = (
                Config.LEGACY_CACHE_FILE if cache_dir is None
                else self.cache_dir / Config.LEGACY_CACHE_FILE.name
            )
        self.legacy_path = Path(legacy_path)

        self.timestamp_mode = (timestamp_mode or Config.CACHE_TIMESTAMP_MODE).lower()
        if self.timestamp_mode not in TIMESTAMP_MODES:
            raise ConfigurationError(
                f"CACHE_TIMESTAMP_MODE must be one of {TIMESTAMP_MODES}, "
                f"got {self.timestamp_mode!r}"
            )

        self.time = time_service or TimeService()

        # One-shot legacy migration state
        self._legacy_migrated = False
        self._legacy_seed: Optional[CacheRecord] = None

    # --- Paths ---
    def path_for(self, name: str) -> Path:
        """Deterministic cache file path for an alias."""
        return self.cache_dir / self.template.format(name=name)

    def collides_with_legacy(self, name: str) -> bool:
        """True if the alias's record would live at the legacy file's path."""
        return self.path_for(name) == self.legacy_path

    # --- Read path ---
    def load(self, name: str) -> CacheRecord:
        """
        Return the persisted record for `name`.

        A missing file is the normal state of a never-seen alias and
        yields found=False, unless an unconsumed legacy record is pending.
        Read or stat failures after a successful open leave the affected
        field at its zero value but still report found=True.
        """
        path = self.path_for(name)

        try:
            fp = open(path, "r", encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return self._take_legacy(name)
        except OSError as e:
            logger.info(f"Cache file {path} unreadable ({e.__class__.__name__}), ignoring")
            return CacheRecord()

        address, last_update = "", 0
        with fp:
            try:
                address = fp.readline().rstrip()
                inline_ts = fp.readline().strip()
            except OSError as e:
                logger.info(f"Failed reading cache file {path}: {e}")
                inline_ts = ""

            last_update = _parse_epoch(inline_ts)
            if not last_update:
                try:
                    last_update = int(os.fstat(fp.fileno()).st_mtime)
                except OSError as e:
                    logger.info(f"Failed stat of cache file {path}: {e}")

        return CacheRecord(address=address, last_update=last_update, found=True)

    # --- Write path ---
    def save(self, name: str, address: str) -> bool:
        """
        Persist `address` as the record for `name`.

        Failure only costs durability for this cycle; the in-memory
        alias state stays authoritative.

        Returns:
            True if the record was written, False otherwise.
        """
        path = self.path_for(name)
        content = address
        if self.timestamp_mode == "inline":
            content = f"{address}\n{self.time.now_epoch()}\n"

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as fp:
                fp.write(content)
        except OSError as e:
            logger.warning(f"Failed writing cache file {path}: {e}")
            return False

        logger.debug(f"Cached {name} → {address} ({path})")
        return True

    def commit(self, alias: Alias, address: str) -> bool:
        """
        Record a confirmed remote update for `alias`.

        Called by provider clients after the DDNS service accepted the new
        address: updates address and last_update together, then persists.
        """
        alias.address = address
        alias.last_update = int(time.time())
        return self.save(alias.name, address)

    def remove(self, name: str) -> bool:
        """Delete the record for `name`; True if a file was removed."""
        try:
            self.path_for(name).unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Failed removing cache file for {name}: {e}")
            return False
        return True

    # --- Legacy single-file cache ---
    def migrate_legacy(self) -> Optional[CacheRecord]:
        """
        Consume the legacy shared cache file, once.

        Reads its address and mtime, deletes it, and holds the record for
        the first alias whose own cache file is missing. Later calls are
        no-ops. Never raises.
        """
        if self._legacy_migrated:
            return self._legacy_seed
        self._legacy_migrated = True

        try:
            with open(self.legacy_path, "r", encoding="utf-8", errors="replace") as fp:
                address = fp.readline().rstrip()
                last_update = int(os.fstat(fp.fileno()).st_mtime)
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.info(f"Legacy cache {self.legacy_path} unreadable: {e}")
            return None

        try:
            self.legacy_path.unlink()
        except OSError as e:
            logger.warning(f"Failed removing legacy cache {self.legacy_path}: {e}")

        if not address:
            logger.info(f"Legacy cache {self.legacy_path} was empty, removed")
            return None

        self._legacy_seed = CacheRecord(
            address=address, last_update=last_update, found=True
        )
        logger.info(
            f"Migrated legacy cache {self.legacy_path}: IP# {address} "
            f"(last update {self.time.format_epoch(last_update)})"
        )
        return self._legacy_seed

    def _take_legacy(self, name: str) -> CacheRecord:
        self.migrate_legacy()

        seed, self._legacy_seed = self._legacy_seed, None
        if seed is None:
            return CacheRecord()

        logger.info(f"Seeding {name} from legacy cache: IP# {seed.address}")
        return seed
