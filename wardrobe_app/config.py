"""Configuration helpers for the wardrobe planner."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_OCCASION = "Casual"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class PlannerConfig:
    """Configuration values for the wardrobe planner.

    Everything has a usable default so the planner runs offline with no
    environment set up. ``random_seed`` pins outfit choices for reproducible
    runs.
    """

    default_occasion: str = DEFAULT_OCCASION
    random_seed: Optional[int] = None
    skip_needs_washing: bool = False
    unworn_days: int = 30
    southern_hemisphere: bool = False
    log_level: str = "INFO"
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is overridden key by key by environment variables.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("WARDROBE_CONFIG_PATH")
        config_dir = Path(os.getenv("WARDROBE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        seed = get_value("random_seed")
        return cls(
            default_occasion=str(get_value("default_occasion", DEFAULT_OCCASION) or DEFAULT_OCCASION),
            random_seed=int(seed) if seed not in (None, "") else None,
            skip_needs_washing=str(get_value("skip_needs_washing", "false")).lower() in _TRUTHY,
            unworn_days=int(get_value("unworn_days", "30") or 30),
            southern_hemisphere=str(get_value("southern_hemisphere", "false")).lower() in _TRUTHY,
            log_level=str(get_value("log_level", "INFO") or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
