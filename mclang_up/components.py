from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import InvalidInput

DEFAULT_MANIFEST = Path(__file__).resolve().parent / "manifests" / "components.yaml"

ALL_COMPONENTS = "all"


@dataclass(frozen=True)
class Component:
    name: str
    url: str
    # Directory under <install-root>/components.
    path: str
    build: bool = True
    # Build output, relative to the component directory.
    binary: Optional[str] = None
    # Standard-library payload, relative to the component directory.
    stdlib: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Component":
        if not isinstance(raw, dict):
            raise ValueError(f"Component entry must be a mapping, got {type(raw)}")
        name = raw.get("name")
        url = raw.get("url")
        if not name or not url:
            raise ValueError(f"Component entry needs 'name' and 'url': {raw}")
        return cls(
            name=str(name),
            url=str(url),
            path=str(raw.get("path") or name),
            build=bool(raw.get("build", True)),
            binary=str(raw["binary"]) if raw.get("binary") else None,
            stdlib=str(raw["stdlib"]) if raw.get("stdlib") else None,
        )


@dataclass(frozen=True)
class Manifest:
    raw: Dict[str, Any]

    @property
    def branches(self) -> List[str]:
        return [str(b) for b in (self.raw.get("branches") or ["dev", "stable"])]

    @property
    def default_branch(self) -> str:
        return str(self.raw.get("default_branch") or "stable")

    @property
    def components(self) -> List[Component]:
        return [Component.from_dict(c) for c in (self.raw.get("components") or [])]

    def select(self, name: str) -> List[Component]:
        """Components to process for a ``--component`` value, in manifest order."""
        components = self.components
        if name == ALL_COMPONENTS:
            return components
        selected = [c for c in components if c.name == name]
        if not selected:
            known = ", ".join(c.name for c in components)
            raise InvalidInput(f"Unknown component {name!r} (known: {known}, or '{ALL_COMPONENTS}')")
        return selected


def load_manifest(path: Optional[str] = None) -> Manifest:
    p = Path(path) if path else DEFAULT_MANIFEST
    if not p.exists():
        raise FileNotFoundError(str(p))

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("component manifest must be YAML")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Manifest is not valid YAML: {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Manifest must be a mapping/dict: {p}")

    manifest = Manifest(raw=raw)
    names: Sequence[str] = [c.name for c in manifest.components]
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate component names in {p}")
    return manifest
