from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..errors import ConfigError

"""Settings loader.

Responsibilities:
- Load an optional YAML settings file (config/csvpick.yml or --config PATH)
- Validate it against the bundled JSON schema (schema.json)
- Apply defaults for every missing key

No settings file is required: without one the tool runs on the defaults below.
"""

SCHEMA_PATH = Path(__file__).parent / "schema.json"
DEFAULT_CONFIG_PATH = Path("config/csvpick.yml")


@dataclass(frozen=True)
class Settings:
    output_dir: str = "outputs"
    head_limit: int = 10  # フィルタなし時の先頭件数
    encoding: str = "utf-8"
    progress_min_rows: int = 10_000  # tqdm を出す最小行数 (TTY のみ)


def _validate_settings_schema(data: dict[str, Any]) -> None:
    """Validate settings data against the bundled JSON schema.

    Raises:
        ConfigError: if the schema file is missing or not valid JSON, or the
            settings data violates the schema (unknown keys, wrong types,
            out-of-range values).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_settings(path: Path) -> Settings:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read config file: {e}") from e

    # 空ファイルはデフォルト扱い
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_settings_schema(data)

    defaults = Settings()
    return Settings(
        output_dir=data.get("output_dir", defaults.output_dir),
        head_limit=data.get("head_limit", defaults.head_limit),
        encoding=data.get("encoding", defaults.encoding),
        progress_min_rows=data.get("progress_min_rows", defaults.progress_min_rows),
    )


def resolve_settings(explicit_path: str | None = None) -> Settings:
    """Pick the settings source for this run.

    An explicit --config path must exist. Otherwise config/csvpick.yml is used
    when present, and the built-in defaults when it is not.
    """
    if explicit_path is not None:
        return load_settings(Path(explicit_path))
    if DEFAULT_CONFIG_PATH.exists():
        return load_settings(DEFAULT_CONFIG_PATH)
    return Settings()
