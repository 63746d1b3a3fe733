import pytest

from ddns_cache.time_service import TimeService


@pytest.mark.parametrize(
    "tz_name, epoch, expected",
    [
        # ✅ UTC
        ("UTC", 1_700_000_000, "11/14/23 @ 22:13:20 UTC"),

        # ✅ Local zone with DST abbreviation
        ("Europe/Berlin", 1_497_373_627, "06/13/17 @ 19:07:07 CEST"),

        # ⚪ Unknown instant
        ("UTC", 0, "never"),

        # ⚠️ Invalid zone → UTC
        ("Invalid/Zone", 1_700_000_000, "11/14/23 @ 22:13:20 UTC"),
    ],
)
def test_format_epoch(tz_name, epoch, expected):
    assert TimeService(tz_name).format_epoch(epoch) == expected

def test_tz_from_environment(monkeypatch):
    monkeypatch.setenv("TZ", "Europe/Berlin")

    assert str(TimeService().tz) == "Europe/Berlin"

@pytest.mark.parametrize("epoch", [99_999_999_999_999_999, 10**17, -10**17])
def test_format_epoch_out_of_range(epoch):
    """Unconvertible values are rendered, never raised"""
    assert TimeService("UTC").format_epoch(epoch) == f"invalid ({epoch})"
