import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from hostcrawl.domain.config import CrawlerConfig
from hostcrawl.exceptions import InvalidConfigError

KEYS = ("seed_url", "max_pages", "concurrency_limit", "user_agent", "http_timeout")


class CrawlerConfigParser:
    """Parse a YAML dict into a CrawlerConfig.

    Responsibility: schema/validation for YAML crawl files. Precedence is
    overrides (typically CLI flags), then file values, then `defaults`
    (typically environment settings). None values never override.
    """

    def read(self, path: Union[str, Path]) -> dict:
        """Read a YAML crawl file into a dict without validating it."""
        path_obj = Path(path)
        try:
            data = yaml.safe_load(path_obj.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise InvalidConfigError("config", f"invalid YAML in {path_obj}: {e}") from e
        except OSError as e:
            raise InvalidConfigError("config", f"cannot read {path_obj}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidConfigError("config", f"top level must be a mapping, got {type(data).__name__}")
        return data

    def parse(self, *, config_path: Optional[str], data: Optional[dict],
              defaults: Optional[dict] = None, **overrides: Any) -> CrawlerConfig:
        data = data or {}
        unknown = sorted(set(data) - set(KEYS))
        if unknown:
            raise InvalidConfigError("config", f"unknown keys: {', '.join(unknown)}")

        merged = {}
        for layer in (defaults or {}, data, overrides):
            merged.update({k: v for k, v in layer.items() if k in KEYS and v is not None})

        if "seed_url" not in merged:
            raise InvalidConfigError("seed_url", "missing")
        if "max_pages" not in merged:
            raise InvalidConfigError("max_pages", "missing")

        return CrawlerConfig(
            config_path=os.path.basename(config_path) if config_path else None,
            **merged,
        )

    def load(self, path: Union[str, Path], defaults: Optional[dict] = None, **overrides: Any) -> CrawlerConfig:
        """Read a YAML file and parse it."""
        return self.parse(config_path=str(path), data=self.read(path), defaults=defaults, **overrides)
