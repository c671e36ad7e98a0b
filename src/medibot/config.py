"""
Chatbot configuration

Loads settings from environment variables (a .env file is picked up by
the CLI). External responders are switched off in this deployment; the
flags exist so a deployment can see that explicitly.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


@dataclass
class MedibotConfig:
    """Configuration for the medical chatbot.

    Environment Variables:
        MEDIBOT_DATASET_PATH: JSON dataset file (default: built-in seed documents)
        MEDIBOT_TOP_K: Matches considered per query (default: 3)
        MEDIBOT_LOCAL_ONLY: Never call external responders (default: true)
    """

    dataset_path: str | None = None
    top_k: int = 3
    local_only: bool = True

    def __post_init__(self):
        if self.top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {self.top_k}")

    @classmethod
    def from_env(cls) -> "MedibotConfig":
        """Load config from environment variables."""
        return cls(
            dataset_path=os.environ.get("MEDIBOT_DATASET_PATH") or None,
            top_k=int(os.environ.get("MEDIBOT_TOP_K", "3")),
            local_only=_env_flag("MEDIBOT_LOCAL_ONLY", "true"),
        )


# Global config singleton
_config: MedibotConfig | None = None


def get_config() -> MedibotConfig:
    """Get the global config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = MedibotConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
