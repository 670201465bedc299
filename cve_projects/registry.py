"""
Project registry: canonical project key -> CVE matching metadata.

Each entry carries a display name, CPE match patterns (glob style, trailing
wildcard) and description keywords. The bundled asset lives in
`data/tracked_projects.json`; any JSON or YAML file with the same shape can
be loaded instead.
"""
from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

import yaml

from .data import TRACKED_PROJECTS_PATH
from .exceptions import RegistryError
from .normalizer import normalize_project_name, parse_project_names

logger = logging.getLogger(__name__)

CANONICAL_KEY_RE = re.compile(r"^[a-z0-9]+$")


def _string_tuple(key: str, field_name: str, value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise RegistryError(f"{key}.{field_name} must be a list of strings")
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise RegistryError(f"{key}.{field_name} contains a non-string or empty item: {item!r}")
    return tuple(value)


@dataclass(frozen=True)
class ProjectConfig:
    """A tracked project and the data used to match it against CVE records."""

    key: str
    name: str
    cpe_patterns: Tuple[str, ...] = ()
    description_keywords: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, key: str, data: Any) -> "ProjectConfig":
        """
        Build an entry from its JSON/YAML representation.

        Accepts both camelCase (`cpePatterns`, `descriptionKeywords`) and
        snake_case field names.

        Raises:
            RegistryError: If the entry does not have the expected shape
        """
        if not isinstance(data, dict):
            raise RegistryError(f"Registry entry '{key}' must be a mapping")

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise RegistryError(f"Registry entry '{key}' is missing a display name")

        patterns = _string_tuple(key, "cpePatterns", data.get("cpePatterns", data.get("cpe_patterns")))
        for pattern in patterns:
            if not pattern.startswith("cpe:"):
                raise RegistryError(f"{key}: invalid CPE pattern {pattern!r}")

        keywords = _string_tuple(
            key, "descriptionKeywords", data.get("descriptionKeywords", data.get("description_keywords"))
        )
        return cls(key=key, name=name, cpe_patterns=patterns, description_keywords=keywords)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "cpePatterns": list(self.cpe_patterns),
            "descriptionKeywords": list(self.description_keywords),
        }


class Resolution(NamedTuple):
    """Result of resolving free-form names against a registry."""

    known: List[ProjectConfig]
    unknown: List[str]


class ProjectRegistry(Mapping):
    """Read-only mapping of canonical project key -> ProjectConfig."""

    def __init__(self, projects: Iterable[ProjectConfig] = ()):
        entries: Dict[str, ProjectConfig] = {}
        for project in projects:
            if not CANONICAL_KEY_RE.match(project.key):
                raise RegistryError(
                    f"Registry key '{project.key}' is not canonical (lowercase letters and digits only)"
                )
            if project.key in entries:
                raise RegistryError(f"Duplicate registry key '{project.key}'")
            entries[project.key] = project
        self._projects = entries

    @classmethod
    def from_dict(cls, data: Any) -> "ProjectRegistry":
        if not isinstance(data, dict):
            raise RegistryError("Registry data must be a mapping of project key -> entry")
        return cls(ProjectConfig.from_dict(str(key), entry) for key, entry in data.items())

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ProjectRegistry":
        """
        Load a registry from a JSON or YAML file.

        Args:
            path: `.json`, `.yaml` or `.yml` file

        Returns:
            ProjectRegistry instance

        Raises:
            RegistryError: If the file is missing, unreadable or malformed
        """
        path = Path(path)
        if not path.exists():
            raise RegistryError(f"Registry file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise RegistryError(f"Could not read registry {path}: {e}") from e

        registry = cls.from_dict(data)
        logger.debug("Loaded %d projects from %s", len(registry), path)
        return registry

    def __getitem__(self, key: str) -> ProjectConfig:
        return self._projects[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._projects)

    def __len__(self) -> int:
        return len(self._projects)

    def __repr__(self) -> str:
        return f"ProjectRegistry({len(self)} projects)"

    def lookup(self, name: Any) -> Optional[ProjectConfig]:
        """Normalize `name` and return its entry, or None if untracked."""
        key = normalize_project_name(name)
        if not key:
            return None
        return self._projects.get(key)

    def resolve(self, raw_text: Any) -> Resolution:
        """
        Resolve newline-separated names into tracked and untracked projects.

        Args:
            raw_text: One project name per line

        Returns:
            Resolution(known, unknown); both lists keep input order
        """
        known: List[ProjectConfig] = []
        unknown: List[str] = []
        for key in parse_project_names(raw_text):
            project = self._projects.get(key)
            if project is None:
                unknown.append(key)
            else:
                known.append(project)
        if unknown:
            logger.debug("Untracked project keys: %s", ", ".join(unknown))
        return Resolution(known, unknown)

    def _collect(self, keys: Iterable[str], attr: str) -> List[str]:
        values: List[str] = []
        seen = set()
        for key in keys:
            project = self._projects.get(key)
            if project is None:
                continue
            for value in getattr(project, attr):
                if value not in seen:
                    seen.add(value)
                    values.append(value)
        return values

    def cpe_patterns(self, keys: Iterable[str]) -> List[str]:
        """All CPE patterns for `keys`, deduplicated. Unknown keys are ignored."""
        return self._collect(keys, "cpe_patterns")

    def description_keywords(self, keys: Iterable[str]) -> List[str]:
        """All description keywords for `keys`, deduplicated. Unknown keys are ignored."""
        return self._collect(keys, "description_keywords")


_default_registry: Optional[ProjectRegistry] = None


def load_default_registry() -> ProjectRegistry:
    """Return the bundled registry, loading it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ProjectRegistry.from_file(TRACKED_PROJECTS_PATH)
    return _default_registry


def load_registry(path: Optional[Union[str, Path]] = None) -> ProjectRegistry:
    """Load the registry at `path`, or the bundled one when `path` is None."""
    if path is None:
        return load_default_registry()
    return ProjectRegistry.from_file(path)


TRACKED_PROJECTS = load_default_registry()
