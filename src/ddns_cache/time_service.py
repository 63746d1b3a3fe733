# --- Standard library imports ---
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from datetime import datetime, timezone


class TimeService:
    """
    Timezone-aware formatting for cache timestamps.

    - TZ loaded once during class initialization
    - Provides:
        * now_epoch()
        * format_local()
        * format_epoch()
    """

    def __init__(self, tz_name: str | None = None):
        tz_name = tz_name or os.getenv("TZ", "UTC")
        try:
            self.tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            self.tz = ZoneInfo("UTC")

    def now_epoch(self) -> int:
        """Current wall clock in whole seconds."""
        return int(datetime.now(timezone.utc).timestamp())

    def format_local(self, dt: datetime) -> str:
        """Format a datetime into the microservice format."""
        return dt.strftime("%m/%d/%y @ %H:%M:%S %Z")

    def format_epoch(self, epoch: int) -> str:
        """
        Format epoch seconds as 'MM/DD/YY @ HH:MM:SS TZ'.

        Zero means "unknown" and is rendered as 'never'; values the
        platform cannot convert are rendered as 'invalid (<epoch>)'.
        """
        if not epoch:
            return "never"
        try:
            dt = datetime.fromtimestamp(epoch, tz=self.tz)
        except (OverflowError, OSError, ValueError):
            return f"invalid ({epoch})"
        return self.format_local(dt)
