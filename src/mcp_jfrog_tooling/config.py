"""Image build configuration: defaults, optional YAML file, environment, command-line overrides.

Config YAML format (mcp-jfrog.yaml in the project root, all keys optional):
- registry: image registry prefix (e.g. ghcr.io/myorg)
- image_name: repository name under the registry
- version: version tag applied alongside :latest
- platforms: comma-separated buildx platforms (or a YAML list)
- port: container port forwarded by ``run``
- test_command: command line delegated to by ``test``
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from mcp_jfrog_tooling.helpers import ConfigError

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "mcp-jfrog.yaml"

# Fixed; not read from file, env or argv.
BUILDER_NAME = "mcp-jfrog-multiarch"

DEFAULT_IMAGE_CONFIG: dict[str, str] = {
    "registry": "docker.io/your-registry",
    "image_name": "mcp-jfrog",
    "version": "0.0.1",
    "platforms": "linux/amd64,linux/arm64",
    "builder_name": BUILDER_NAME,
    "port": "8080",
    "test_command": "npm test",
}

# Variable name (env or NAME=value on argv) -> config key.
ENV_OVERRIDES: dict[str, str] = {
    "IMAGE_REGISTRY": "registry",
    "IMAGE_NAME": "image_name",
    "VERSION": "version",
    "PLATFORMS": "platforms",
}

_FILE_KEYS = frozenset(DEFAULT_IMAGE_CONFIG) - {"builder_name"}


def _normalize(key: str, value: Any) -> str:
    if key == "platforms" and isinstance(value, (list, tuple)):
        return ",".join(str(v).strip() for v in value)
    return str(value)


def load_config_file(path: Path) -> dict[str, str]:
    """Load config keys from YAML. Missing file -> {}. Raises ConfigError if unparsable or not a mapping."""
    if not path.is_file():
        return {}
    try:
        with path.open() as f:
            # BaseLoader keeps scalars as strings (version: 1.10 stays "1.10").
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        msg = f"Could not parse {path}: {e}"
        raise ConfigError(msg) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must be a mapping: {path}"
        raise ConfigError(msg)
    out: dict[str, str] = {}
    for key, value in data.items():
        if key not in _FILE_KEYS:
            log.warning("Ignoring unknown key %r in %s", key, path)
            continue
        if value is None or value == "":
            continue
        out[key] = _normalize(key, value)
    return out


def resolve_image_config(
    file_values: Mapping[str, str] | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Layer defaults < file_values < env < overrides. Empty values never override.

    env is keyed by variable name (IMAGE_REGISTRY, VERSION, ...); overrides may use
    either variable names or config keys.
    """
    out = dict(DEFAULT_IMAGE_CONFIG)
    for key, value in (file_values or {}).items():
        if key in _FILE_KEYS and value:
            out[key] = value
    for var, key in ENV_OVERRIDES.items():
        value = (env or {}).get(var, "")
        if value:
            out[key] = value
    for name, value in (overrides or {}).items():
        key = ENV_OVERRIDES.get(name, name)
        if key in _FILE_KEYS and value:
            out[key] = value
    return out


def load_config(
    project_root: Path,
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Resolve effective config for project_root. env defaults to os.environ.

    An explicit config_path must exist; the default mcp-jfrog.yaml is optional.
    """
    if config_path is not None and not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise ConfigError(msg)
    path = config_path if config_path is not None else project_root / CONFIG_FILE_NAME
    file_values = load_config_file(path)
    if file_values:
        log.debug("Loaded %s from %s", sorted(file_values), path)
    return resolve_image_config(file_values, os.environ if env is None else env, overrides)


# --- Derived names ---


def full_image_name(cfg: Mapping[str, str]) -> str:
    """{registry}/{image_name}, e.g. docker.io/your-registry/mcp-jfrog."""
    return f"{cfg['registry'].rstrip('/')}/{cfg['image_name']}"


def version_tag(cfg: Mapping[str, str]) -> str:
    return f"{full_image_name(cfg)}:{cfg['version']}"


def latest_tag(cfg: Mapping[str, str]) -> str:
    return f"{full_image_name(cfg)}:latest"


def image_tags(cfg: Mapping[str, str]) -> list[str]:
    """Tags applied by build/build-local and removed by clean: version, then latest."""
    return [version_tag(cfg), latest_tag(cfg)]


def platform_list(cfg: Mapping[str, str]) -> list[str]:
    return [p.strip() for p in cfg["platforms"].split(",") if p.strip()]
