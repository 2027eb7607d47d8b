"""Tests for configuration loading."""

import pytest

from reviewpost_core.config import ProviderConfig, load_config


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["comment_footer"] == ""
    assert config["unmappable_line"] == "anchor"
    assert config["batch_limit"] is None
    assert config["status_context"] == "reviewpost"
    assert config["status_target_url"] == ""


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".reviewpost.yml"
    cfg.write_text("comment_footer: 'To post feedback go to %s'\nbatch_limit: 30\nunmappable_line: drop\n")
    config = load_config(config_path=str(cfg))
    assert config["comment_footer"] == "To post feedback go to %s"
    assert config["batch_limit"] == 30
    assert config["unmappable_line"] == "drop"


def test_empty_config_file_keeps_defaults(tmp_path):
    cfg = tmp_path / ".reviewpost.yml"
    cfg.write_text("")
    config = load_config(config_path=str(cfg))
    assert config["status_context"] == "reviewpost"


def test_cli_overrides_config_file(tmp_path):
    cfg = tmp_path / ".reviewpost.yml"
    cfg.write_text("status_context: from-file\n")
    config = load_config(config_path=str(cfg), cli_overrides={"status_context": "from-cli"})
    assert config["status_context"] == "from-cli"


def test_none_cli_overrides_ignored(tmp_path):
    cfg = tmp_path / ".reviewpost.yml"
    cfg.write_text("status_context: from-file\n")
    config = load_config(config_path=str(cfg), cli_overrides={"status_context": None})
    assert config["status_context"] == "from-file"


def test_github_token_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("GITHUB_TOKEN", "gh-token")
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["github_token"] == "gh-token"


def test_github_token_none_when_unset(monkeypatch, tmp_path):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["github_token"] is None


class TestProviderConfigFromConfig:
    def test_from_defaults(self, tmp_path):
        config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
        assert ProviderConfig.from_config(config) == ProviderConfig()

    def test_values_carried_over(self):
        provider = ProviderConfig.from_config(
            {
                "comment_footer": "See %s",
                "unmappable_line": "drop",
                "batch_limit": "10",
                "status_context": "ci/analysis",
                "status_target_url": "https://example.com",
            }
        )
        assert provider == ProviderConfig(
            comment_footer="See %s",
            unmappable_line="drop",
            batch_limit=10,
            status_context="ci/analysis",
            status_target_url="https://example.com",
        )

    def test_invalid_policy_raises(self):
        with pytest.raises(ValueError):
            ProviderConfig.from_config({"unmappable_line": "maybe"})

    def test_null_values_fall_back_to_defaults(self):
        provider = ProviderConfig.from_config({"comment_footer": None, "status_context": None})
        assert provider.comment_footer == ""
        assert provider.status_context == "reviewpost"
