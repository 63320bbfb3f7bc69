"""Code generation settings read from ``.zerovalid.yaml``."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_NAME = ".zerovalid.yaml"

_MODULE_LINE = re.compile(r"module(?:[ \t]+|(?=[\"`]))(.*)$")


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{where}: expected a mapping, got {type(value).__name__}")
    return value


def _sequence(value: Any, where: str) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ValueError(f"{where}: expected a list, got {type(value).__name__}")
    return list(value)


def _string(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ValueError(f"{where}: expected a string, got {type(value).__name__}")
    return str(value)


def _strings(value: Any, where: str) -> list[str]:
    return [_string(item, where) for item in _sequence(value, where)]


@dataclass
class FieldTag:
    """Tag values to give to a field with a given name."""

    field_name: str = ""
    value_by_tags: dict[str, str] = field(default_factory=dict)


@dataclass
class AdditionalTags:
    """Extra tags for fields of the structs whose names match ``matches``."""

    matches: list[str] = field(default_factory=list)
    field_tags: list[FieldTag] = field(default_factory=list)

    def field_tags_by_field(self) -> dict[str, dict[str, str]]:
        """Tag values by field name; a later entry for a field replaces an earlier one."""
        return {tag.field_name: tag.value_by_tags for tag in self.field_tags}


@dataclass
class GrpcConfig:
    """Settings for generating from protobuf files."""

    exclude: list[str] = field(default_factory=list)


@dataclass
class PackageStructsConfig:
    """Patterns selecting the structs of a package."""

    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)


@dataclass
class PackageConfig:
    """Settings for one package to generate extractors for."""

    structs: PackageStructsConfig = field(default_factory=PackageStructsConfig)
    dst: str = ""


@dataclass
class Config:
    """All generation settings, with the module the project belongs to."""

    grpc: GrpcConfig = field(default_factory=GrpcConfig)
    additional_tags: list[AdditionalTags] = field(default_factory=list)
    packages: dict[str, PackageConfig] = field(default_factory=dict)
    go_module_path: str = ""
    base_path: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> Config:
        """Build settings from a decoded document; unknown keys are ignored."""
        root = _mapping(data, "config")

        grpc_data = _mapping(root.get("grpc"), "grpc")
        grpc = GrpcConfig(exclude=_strings(grpc_data.get("exclude"), "grpc.exclude"))

        additional_tags = []
        for item in _sequence(root.get("additional_tags"), "additional_tags"):
            item = _mapping(item, "additional_tags[]")
            field_tags = []
            for tag in _sequence(item.get("field_tags"), "additional_tags[].field_tags"):
                tag = _mapping(tag, "additional_tags[].field_tags[]")
                values = _mapping(tag.get("tags"), "field_tags[].tags")
                field_tags.append(
                    FieldTag(
                        field_name=_string(tag.get("field_name"), "field_tags[].field_name"),
                        value_by_tags={
                            str(key): _string(value, "field_tags[].tags")
                            for key, value in values.items()
                        },
                    )
                )
            additional_tags.append(
                AdditionalTags(
                    matches=_strings(item.get("matches"), "additional_tags[].matches"),
                    field_tags=field_tags,
                )
            )

        packages = {}
        for name, package in _mapping(root.get("packages"), "packages").items():
            package = _mapping(package, f"packages.{name}")
            structs = _mapping(package.get("structs"), f"packages.{name}.structs")
            packages[str(name)] = PackageConfig(
                structs=PackageStructsConfig(
                    include=_strings(structs.get("include"), f"packages.{name}.structs.include"),
                    exclude=_strings(structs.get("exclude"), f"packages.{name}.structs.exclude"),
                ),
                dst=_string(package.get("dst"), f"packages.{name}.dst"),
            )

        return cls(grpc=grpc, additional_tags=additional_tags, packages=packages)


def _module_path(go_mod: str) -> str:
    for line in go_mod.splitlines():
        line = line.split("//", 1)[0].strip()
        match = _MODULE_LINE.match(line)
        if match is None:
            continue
        name = match.group(1).strip()
        if len(name) >= 2 and name[0] == name[-1] and name[0] in "\"`":
            name = name[1:-1]
        return name
    return ""


def find_go_module(start: str | os.PathLike[str]) -> tuple[str, str]:
    """Return ``(base_path, module_path)`` of the nearest go.mod at or above ``start``.

    Raises LookupError if no directory up to the root holds a go.mod.
    """
    directory = Path(start).resolve()
    for candidate in (directory, *directory.parents):
        try:
            data = (candidate / "go.mod").read_text(encoding="utf-8")
        except FileNotFoundError:
            continue
        return candidate.as_posix(), _module_path(data)
    raise LookupError(f"failed to find go.mod above {directory.as_posix()}")


def _with_module(config: Config) -> Config:
    base_path, module_path = find_go_module(Path.cwd())
    return replace(config, go_module_path=module_path, base_path=base_path)


def _load(path: str | os.PathLike[str]) -> Config:
    with open(path, encoding="utf-8") as stream:
        data = yaml.safe_load(stream)
    if data is None:
        raise ValueError(f"{os.fspath(path)}: empty configuration")
    return Config.from_mapping(data)


def read_config(path: str | os.PathLike[str]) -> Config:
    """Read settings from a YAML file and attach the module of the working directory."""
    return _with_module(_load(path))


def get_default_config() -> Config:
    """Settings from ``.zerovalid.yaml`` in the working directory, or defaults if unreadable."""
    try:
        config = _load(Path.cwd() / DEFAULT_CONFIG_NAME)
    except (OSError, yaml.YAMLError, ValueError):
        config = Config()
    return _with_module(config)