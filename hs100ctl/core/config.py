"""Configuration loading and validation for the YAML device registry."""

from __future__ import annotations

import json
import logging
from collections.abc import Hashable
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from hs100ctl.core.errors import ConfigLoadError, ConfigValidationError
from hs100ctl.core.model import Device, split_address

DEFAULT_CONFIG_PATH = Path("config.yaml")
DEFAULT_ACTION = "on"
LOGGER = logging.getLogger(__name__)


_BOOL_TAG = "tag:yaml.org,2002:bool"


class ConfigLoader(yaml.SafeLoader):
    """Safe loader for config files.

    Duplicate keys are errors, and YAML 1.1 booleans are not resolved so that
    ``do: on`` stays the action name.
    """

    yaml_implicit_resolvers = {
        first_char: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
        for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }

    def construct_unique_mapping(self, node: yaml.MappingNode) -> dict[Any, Any]:
        self.flatten_mapping(node)
        mapping: dict[Any, Any] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=True)
            line = key_node.start_mark.line + 1
            if not isinstance(key, Hashable):
                raise ConfigValidationError(f"Unhashable key at line {line}")
            if key in mapping:
                raise ConfigValidationError(f"Duplicate key '{key}' at line {line}")
            mapping[key] = self.construct_object(value_node, deep=True)
        return mapping


ConfigLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    ConfigLoader.construct_unique_mapping,
)


@dataclass(frozen=True)
class Config:
    path: Path
    devices: dict[str, str] = field(default_factory=dict)
    action: str = DEFAULT_ACTION
    device: str | None = None
    timeout_s: float | None = None

    def device_list(self) -> list[Device]:
        return [Device(name=name, address=address) for name, address in self.devices.items()]

    def settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {
            "config": str(self.path),
            "do": self.action,
            "device": self.device,
            "timeout_s": self.timeout_s,
        }
        for name, address in self.devices.items():
            settings[f"devices.{name}"] = address
        return {key: value for key, value in settings.items() if value is not None}


def _load_schema_validator() -> Any:
    schema_text = resources.files("hs100ctl.schemas").joinpath("config.schema.json").read_text(
        encoding="utf-8"
    )
    schema = json.loads(schema_text)
    validator_cls = validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigLoadError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigLoadError(f"Could not read config file {path}: {exc}") from exc

    try:
        loaded = yaml.load(content, Loader=ConfigLoader)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping at root")
    return loaded


def _build_config(doc: dict[str, Any], source: Path) -> Config:
    validator = _load_schema_validator()
    try:
        validator.validate(doc)
    except ValidationError as exc:
        path = ".".join(str(p) for p in exc.path)
        where = f" ({path})" if path else ""
        raise ConfigValidationError(f"Schema validation failed for {source}{where}: {exc.message}") from exc

    devices: dict[str, str] = {}
    for name, address in doc["devices"].items():
        try:
            split_address(address)
        except ValueError as exc:
            raise ConfigValidationError(f"{source} devices.{name}: {exc}") from exc
        devices[name] = address.strip()

    timeout = doc.get("timeout_s")
    return Config(
        path=source,
        devices=devices,
        action=doc.get("do", DEFAULT_ACTION).strip().lower(),
        device=doc.get("device"),
        timeout_s=float(timeout) if timeout is not None else None,
    )


def load_config(path: Path | str | None = None) -> Config:
    source = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    doc = _read_yaml(source)
    config = _build_config(doc, source)
    LOGGER.debug("Loaded %d device(s) from %s", len(config.devices), source)
    return config
