import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG: dict = {
    "comment_footer": "",  # e.g. "To post feedback go to %s"; empty disables the footer
    "unmappable_line": "anchor",  # "anchor" = demote to file-level comment, "drop" = skip
    # Max inline comments per review; None = one review. A failed batch leaves
    # the earlier batches posted.
    "batch_limit": None,
    "status_context": "reviewpost",
    "status_target_url": "",
}

UNMAPPABLE_POLICIES = ("anchor", "drop")


def load_config(config_path: str = ".reviewpost.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .reviewpost.yml in the current directory
      3. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    config["github_token"] = os.environ.get("GITHUB_TOKEN")

    return config


@dataclass(frozen=True)
class ProviderConfig:
    comment_footer: str = ""
    unmappable_line: str = "anchor"
    batch_limit: Optional[int] = None
    status_context: str = "reviewpost"
    status_target_url: str = ""

    def __post_init__(self):
        if self.unmappable_line not in UNMAPPABLE_POLICIES:
            raise ValueError(
                f"Unknown unmappable_line policy: {self.unmappable_line!r}. Choose 'anchor' or 'drop'."
            )
        if self.batch_limit is not None and self.batch_limit < 1:
            raise ValueError(f"batch_limit must be a positive integer, got {self.batch_limit!r}.")

    @classmethod
    def from_config(cls, config: dict) -> "ProviderConfig":
        batch_limit = config.get("batch_limit")
        return cls(
            comment_footer=config.get("comment_footer") or "",
            unmappable_line=config.get("unmappable_line") or "anchor",
            batch_limit=int(batch_limit) if batch_limit is not None else None,
            status_context=config.get("status_context") or DEFAULT_CONFIG["status_context"],
            status_target_url=config.get("status_target_url") or "",
        )
