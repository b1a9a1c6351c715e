"""Single config object: read from env, passed to the CLI and logging setup."""
import os
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class Config:
    """
    Settings for the poeaa command line tool.
    Build with Config.from_env() or pass values directly: Config(log_level="DEBUG").
    """

    log_level: str = "WARNING"
    log_format: str = "console"

    @classmethod
    def load_from_env(cls, prefix: str = "POEAA_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for Config(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result

    @classmethod
    def from_env(cls, prefix: str = "POEAA_") -> "Config":
        """Config from env; unknown POEAA_* variables are ignored."""
        known = {f.name for f in fields(cls)}
        values = cls.load_from_env(prefix)
        return cls(**{k: v for k, v in values.items() if k in known})
