import pytest
from unittest.mock import patch

from conftest import FakeResolver
from ddns_cache import __main__ as cli
from ddns_cache.config import Config


# ========
# FIXTURES
# ========
@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point the CLI at a temporary cache directory and a fake resolver"""
    monkeypatch.setattr(Config, "CACHE_DIR", tmp_path)
    monkeypatch.setattr(Config, "LEGACY_CACHE_FILE", tmp_path / "ddns.legacy")
    monkeypatch.setattr(Config, "RESET_RESOLVER_CACHE", False)
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    resolver = FakeResolver(address="192.0.2.10")
    with patch.object(cli, "get_resolver", return_value=resolver):
        yield resolver


def test_main_seeds_and_reports(monkeypatch, tmp_path, capsys, isolated_config):
    (tmp_path / "a.example.com.cache").write_text("203.0.113.9")
    monkeypatch.setattr(Config, "DDNS_PROVIDERS", "default@dyndns.org:a.example.com,b.example.com")

    assert cli.main() == 0

    out = capsys.readouterr().out
    assert "203.0.113.9" in out
    assert "192.0.2.10" in out
    assert isolated_config.calls == ["b.example.com"]

def test_main_configuration_error(monkeypatch, capsys):
    monkeypatch.setattr(Config, "DDNS_PROVIDERS", "")

    assert cli.main() == 2
    assert "Configuration error" in capsys.readouterr().out
