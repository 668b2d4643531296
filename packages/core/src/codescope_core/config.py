import os
from pathlib import Path
from typing import Optional

import yaml

PROVIDERS = ("gemini", "openai", "anthropic")
STORAGE_BACKENDS = ("file", "sqlite", "memory")

DEFAULT_CONFIG: dict = {
    "provider": "gemini",
    "model": None,  # None = the provider's default model
    "storage": "file",
    "storage_path": None,  # None = backend default (~/.codescope or .codescope.db)
    "source_language": "typescript",
}

# Checked in order; the first one set wins.
_GEMINI_KEY_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")


def load_config(config_path: str = ".codescope.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .codescope.yml in the current directory
      3. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        if not isinstance(file_config, dict):
            raise ValueError(f"{config_path} must contain a mapping, got {type(file_config).__name__}")
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    # Resolve credentials from environment variables
    config["gemini_api_key"] = next((os.environ[v] for v in _GEMINI_KEY_VARS if os.environ.get(v)), None)
    config["openai_api_key"] = os.environ.get("OPENAI_API_KEY")
    config["anthropic_api_key"] = os.environ.get("ANTHROPIC_API_KEY")

    return config


def api_key_env_var(provider: str) -> str:
    """Name of the environment variable users should set for `provider`."""
    return {"gemini": "GEMINI_API_KEY", "openai": "OPENAI_API_KEY", "anthropic": "ANTHROPIC_API_KEY"}[provider]
