import pytest

from ddns_cache.models import Alias, DDNSContext, Provider


@pytest.mark.parametrize(
    "last_update, now, expected",
    [
        # ⚪ Unknown update instant
        (0, 1_700_000_000, None),

        # ✅ 90 seconds ago
        (1_699_999_910, 1_700_000_000, 90),

        # ⚠️ Clock went backwards → clamp at zero
        (1_700_000_050, 1_700_000_000, 0),
    ],
)
def test_seconds_since_update(last_update, now, expected):
    alias = Alias(name="a.example.com", address="192.0.2.1", last_update=last_update)

    assert alias.seconds_since_update(now) == expected

def test_reset_clears_address_and_timestamp_together():
    alias = Alias(name="a.example.com", address="192.0.2.1", last_update=42)
    alias.reset()

    assert (alias.address, alias.last_update) == ("", 0)

def test_context_iterates_all_aliases():
    ctx = DDNSContext(providers=[
        Provider(name="p1", aliases=[Alias("a"), Alias("b")]),
        Provider(name="p2", aliases=[Alias("c")]),
    ])

    assert [a.name for a in ctx.aliases()] == ["a", "b", "c"]
