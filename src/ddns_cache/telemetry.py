# --- Standard library imports ---
import time
import logging
from typing import Optional

# --- Project imports ---
from .models import Alias
from .time_service import TimeService


# Seeding outcome → (emoji, state label)
SEED_OUTCOMES = {
    "cached":   ("💾", "CACHED"),
    "resolved": ("🔎", "RESOLVED"),
    "skipped":  ("⏭️ ", "SKIPPED"),
    "failed":   ("❔", "EMPTY"),
}

def tlog(
    logger: logging.Logger,
    emoji: str,
    subsystem: str,
    state: str,
    primary: str = "—--",
    meta: str | None = None,
) -> None:
    """
    Emit a standardized telemetry log "tlog" line.

    Format:
        SUBSYSTEM STATE PRIMARY | meta data
    """
    msg = f"{subsystem:<12} {state:<10} {primary:<32}"
    if meta:
        msg += f" | {meta}"

    logger.info(f"{emoji} {msg}", stacklevel=3)

def seed_event(
    logger: logging.Logger,
    outcome: str,
    alias_name: str,
    detail: Optional[str] = None,
) -> None:
    """One SEED line per alias; `outcome` is a SEED_OUTCOMES key."""
    emoji, state = SEED_OUTCOMES[outcome]
    tlog(logger, emoji, "SEED", state, alias_name, detail)

def seed_summary(logger: logging.Logger, report, elapsed_ms: float) -> None:
    """
    Close a seeding pass: TIMING line plus per-outcome counts.

    `report` is any object with one integer attribute per SEED_OUTCOMES key.
    """
    logger.timing(f"Timing | {'seed_all()':<28} [{elapsed_ms:8.1f} ms]")

    counts = {outcome: getattr(report, outcome) for outcome in SEED_OUTCOMES}
    total = sum(counts.values())
    meta = ", ".join(
        f"{SEED_OUTCOMES[outcome][1].lower()}={n}" for outcome, n in counts.items()
    )
    tlog(logger, "🌱", "SEED", "DONE", f"{total} alias(es)", meta)

def alias_state(
    logger: logging.Logger,
    provider_name: str,
    alias: Alias,
    time_service: TimeService,
    now: Optional[float] = None,
) -> None:
    """
    Report the state an alias hands to the update scheduler:
    address, last update instant and staleness.
    """
    if now is None:
        now = time.time()

    age = alias.seconds_since_update(now)
    if age is None:
        meta = "last update unknown"
    else:
        meta = f"last update {time_service.format_epoch(alias.last_update)} ({age} s ago)"

    tlog(logger, "📌", provider_name, "STATE", alias.name, f"{alias.address or '—'} | {meta}")
