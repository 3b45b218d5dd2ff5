import json
from pathlib import Path
from typing import Dict, Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.const import (
    CONFIG_FILE_NAME, DEFAULT_LOG_LEVEL, DEFAULT_RATE, DEFAULT_WRK2_BINARY,
    ENV_PREFIX, LIBRARY_LOG_LEVELS
)


class Config(BaseSettings):
    """Global configuration settings for the wrk2 wrapper."""

    wrk2_binary: str = DEFAULT_WRK2_BINARY
    default_rate: int = Field(default=DEFAULT_RATE, gt=0, description="Requests/sec passed with -R when the user gives none")
    timeout_seconds: Optional[float] = Field(default=None, gt=0, description="Seconds to wait for wrk2 before giving up")
    export_dir: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from the wrk2_wrapper.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                config = json.load(f)
                # Convert export_dir to Path if it's a string
                if config.get("export_dir"):
                    config["export_dir"] = Path(config["export_dir"])
                return config
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
