"""
Contemplate configuration management (YAML file + environment overrides).
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import yaml
from jsonschema import Draft202012Validator

from contemplate.core.engine import Engine
from contemplate.core.exceptions import ConfigurationError
from contemplate.core.resolution import DefaultStrategy
from contemplate.core.templates.theme import Theme, ThemeHierarchy
from contemplate.core.utils.io import iter_yaml_candidates, read_yaml
from contemplate.core.utils.merge import deep_merge
from contemplate.data import get_data_path
from contemplate.data import read_yaml as read_data_yaml

logger = logging.getLogger(__name__)

CONFIG_BASENAME = "contemplate"
ENV_PREFIX = "CONTEMPLATE_"
SCHEMA_NAME = "config.schema.yaml"
TYPE_TAGS_ENV_PREFIX = "EXTENSIONS__TYPES__"


class ConfigManager:
    """Load, merge, and validate Contemplate configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: CONTEMPLATE_* (``__`` separates nested keys)
    2. Config file: ``contemplate.yaml`` / ``contemplate.yml``
    3. Bundled defaults: contemplate.data/config/defaults.yaml

    Relative paths in the configuration are resolved against ``base_dir``,
    which is the config file's directory when a file is used.

    Usage:
        manager = ConfigManager("site/contemplate.yaml")
        engine = manager.build_engine()
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        *,
        base_dir: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        if path is not None:
            self.path: Optional[Path] = Path(path)
            if not self.path.is_file():
                raise ConfigurationError(
                    f'Configuration file "{self.path}" does not exist.',
                    context={"path": str(self.path)},
                )
            self.base_dir = base_dir or self.path.absolute().parent
        else:
            self.base_dir = base_dir or Path.cwd()
            self.path = self._find_config_file(self.base_dir)

    @staticmethod
    def _find_config_file(directory: Path) -> Optional[Path]:
        for candidate in iter_yaml_candidates(directory / CONFIG_BASENAME):
            if candidate.is_file():
                return candidate
        return None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Configuration must never silently ignore invalid YAML.
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f'Configuration file "{path}" is not valid YAML: {exc}',
                context={"path": str(path)},
            ) from exc
        if not isinstance(data, dict):
            raise ConfigurationError(
                f'Configuration file "{path}" must contain a mapping, got {type(data).__name__}.',
                context={"path": str(path)},
            )
        return data

    # ------------------------------------------------------------------
    # Environment overrides
    # ------------------------------------------------------------------

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _parse_env_key(self, raw: str) -> List[Union[str, int]]:
        # Type tags are opaque: everything after EXTENSIONS__TYPES__ is one
        # segment, kept verbatim so ``__TEMPLATE__`` style tags survive.
        if raw.upper().startswith(TYPE_TAGS_ENV_PREFIX) and len(raw) > len(TYPE_TAGS_ENV_PREFIX):
            return ["extensions", "types", raw[len(TYPE_TAGS_ENV_PREFIX):]]
        segments: List[Union[str, int]] = []
        for seg in raw.split("__"):
            if seg == "":
                raise ConfigurationError(
                    f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
                    context={"key": ENV_PREFIX + raw},
                )
            segments.append(int(seg) if seg.isdigit() else seg.lower())
        return segments

    def _iter_env_overrides(self) -> Iterator[Tuple[List[Union[str, int]], Any, str]]:
        for key in sorted(self.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if not raw:
                continue
            yield self._parse_env_key(raw), self._coerce_type(self.environ[key]), key

    def _set_nested(self, root: Dict[str, Any], path: List[Union[str, int]], value: Any, key: str) -> None:
        cur: Any = root
        for i, part in enumerate(path):
            is_last = i == len(path) - 1
            if isinstance(part, int):
                if not isinstance(cur, list) or part >= len(cur):
                    raise ConfigurationError(
                        f"{key}: list index {part} is out of range.",
                        context={"key": key},
                    )
            elif not isinstance(cur, dict):
                raise ConfigurationError(
                    f"{key}: cannot set a key inside a non-mapping value.",
                    context={"key": key},
                )
            if is_last:
                cur[part] = value
                return
            if isinstance(cur, dict) and part not in cur:
                cur[part] = {}
            cur = cur[part]

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value, key in self._iter_env_overrides():
            logger.info("Applying environment override %s", key)
            self._set_nested(cfg, path, typed_value, key)

    # ------------------------------------------------------------------
    # Loading and validation
    # ------------------------------------------------------------------

    def validate_schema(self, cfg: Dict[str, Any]) -> None:
        """Validate ``cfg`` against the bundled schema.

        Raises:
            ConfigurationError: naming the first failing key path
        """
        schema = read_data_yaml("schemas", SCHEMA_NAME)
        validator = Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(cfg), key=lambda e: [str(p) for p in e.absolute_path])
        if not errors:
            return
        error = errors[0]
        key_path = ".".join(str(p) for p in error.absolute_path) or "<root>"
        raise ConfigurationError(
            f'Invalid configuration at "{key_path}": {error.message}',
            context={
                "key": key_path,
                "source": str(self.path) if self.path else None,
                "errors": len(errors),
            },
        )

    def load_config(self, *, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration dictionary."""
        logger.debug("Loading bundled defaults from %s", get_data_path("config", "defaults.yaml"))
        cfg: Dict[str, Any] = copy.deepcopy(read_data_yaml("config", "defaults.yaml") or {})

        if self.path is not None:
            logger.debug("Loading configuration file %s", self.path)
            cfg = deep_merge(cfg, self.load_yaml(self.path))

        self.apply_env_overrides(cfg)

        if validate:
            self.validate_schema(cfg)
        return cfg

    def build_engine(self, config: Optional[Dict[str, Any]] = None) -> Engine:
        """Create an engine from ``config`` (loaded when omitted)."""
        if config is None:
            config = self.load_config()
        return build_engine(config, self.base_dir)


def resolve_config_path(value: str, base_dir: Path) -> Path:
    """Expand variables and ``~`` then anchor relative paths at ``base_dir``."""
    path = Path(os.path.expanduser(os.path.expandvars(value)))
    if not path.is_absolute():
        path = Path(base_dir) / path
    return path


def build_engine(config: Mapping[str, Any], base_dir: Path) -> Engine:
    """Create an engine from a merged, validated configuration mapping.

    Raises:
        ConfigurationError: the theme strategy is selected without themes
        DirectoryNotFound: a configured directory does not exist
    """
    extensions = config.get("extensions") or {}
    default_extension = extensions.get("default", "py")
    directory = config.get("directory")
    strategy = config.get("strategy") or "default"

    if strategy == "theme":
        themes = config.get("themes") or []
        if not themes:
            raise ConfigurationError(
                'Invalid configuration at "themes": the theme strategy needs at least one theme.',
                context={"key": "themes"},
            )
        hierarchy = ThemeHierarchy.of(
            Theme.new(resolve_config_path(t["path"], base_dir), t.get("name")) for t in themes
        )
        engine = Engine.from_theme(hierarchy, default_extension)
        if directory:
            engine.set_directory(resolve_config_path(directory, base_dir))
    else:
        engine = Engine(
            resolve_config_path(directory, base_dir) if directory else None,
            default_extension,
        )
        engine.set_resolution_strategy(
            DefaultStrategy(engine.config, fallback_order=config.get("fallback_order") or "registration")
        )

    for type_tag, extension in (extensions.get("types") or {}).items():
        engine.set_file_extension(extension, type_tag)

    for folder in config.get("folders") or []:
        engine.add_folder(
            folder["name"],
            resolve_config_path(folder["path"], base_dir),
            bool(folder.get("fallback", False)),
        )

    logger.debug("Built engine with strategy %r", engine.resolution_strategy)
    return engine


__all__ = ["ConfigManager", "build_engine", "resolve_config_path"]
