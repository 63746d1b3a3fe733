import pytest
import logging
from ddns_cache.logger import resolve_level, setup_logging, get_logger

@pytest.mark.parametrize(
    "level, message, expected_in_output",
    [
        (logging.DEBUG, "Cached IP# from previous invocation", True),
        (logging.INFO, "Resolving hostname home.example.com", True),
        (logging.WARNING, "Failed resolving hostname nxdomain.example", True),
        (logging.ERROR, "Failed writing cache file", True),
        (logging.CRITICAL, "Configuration error", True),
    ],
)

def test_logger_configuration(capsys, level, message, expected_in_output):
    """Smoke test to ensure logger setup produces expected formatted output at various levels"""
    setup_logging(level=logging.DEBUG)  # always capture all messages
    logger = get_logger("test")

    logger.log(level, message)

    captured = capsys.readouterr()
    assert (message in captured.out) is expected_in_output

@pytest.mark.parametrize("enabled", [True, False])
def test_timing_logs_follow_filter(capsys, enabled):
    """TIMING records only reach the output when enabled"""
    setup_logging(level=logging.DEBUG, timing_enabled=enabled)
    logger = get_logger("test")

    logger.timing("Timing | seed_all()")

    captured = capsys.readouterr()
    assert ("seed_all()" in captured.out) is enabled

def test_short_level_names(capsys):
    setup_logging(level=logging.INFO)
    get_logger("test").warning("stale resolver answer")

    captured = capsys.readouterr()
    assert "⚠️" in captured.out
    assert "test:test_short_level_names" in captured.out
    assert "ddns_cache.test" not in captured.out

@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.DEBUG, logging.DEBUG),
        ("info", logging.INFO),
        ("TIME", 25),
        (" warning ", logging.WARNING),

        # ⚠️ Unknown name → INFO
        ("chatty", logging.INFO),
    ],
)
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected

def test_setup_logging_accepts_level_name(capsys):
    setup_logging(level="WARNING")
    logger = get_logger("test")

    logger.info("quiet")
    logger.warning("loud")

    captured = capsys.readouterr()
    assert "quiet" not in captured.out
    assert "loud" in captured.out
