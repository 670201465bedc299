"""
CVE Projects - project name normalization and CVE matching metadata.

This library provides:
- Normalization of human-typed project names ("Node", "k8s", "Postgres")
  into canonical project keys
- A registry mapping canonical keys to CPE patterns and description keywords
- A small CLI for checking how names are interpreted

Quick Start:
    >>> from cve_projects import parse_project_names, TRACKED_PROJECTS
    >>>
    >>> keys = parse_project_names("node\\nPostgres\\nk8s")
    >>> keys
    ['nodejs', 'postgresql', 'kubernetes']
    >>> TRACKED_PROJECTS.cpe_patterns(keys)[0]
    'cpe:2.3:a:nodejs:node.js:*'

For CLI usage:
    $ cve-projects parse names.txt
    $ cve-projects lookup postgres
"""

from .__version__ import (
    __version__,
    __version_info__,
    __title__,
    __description__,
    __author__,
    __license__,
)
from .normalizer import (
    NAME_MAP,
    Transformation,
    normalize_project_name,
    parse_project_names,
    show_transformations,
)
from .exceptions import (
    CveProjectsError,
    RegistryError,
    ValidationError,
)


# Registry is loaded lazily so importing the normalizer doesn't read the data asset
def __getattr__(name):
    """Lazy import for the registry module."""
    if name in ["ProjectConfig", "ProjectRegistry", "Resolution", "TRACKED_PROJECTS",
                "load_default_registry", "load_registry"]:
        from .registry import (
            ProjectConfig,
            ProjectRegistry,
            Resolution,
            TRACKED_PROJECTS,
            load_default_registry,
            load_registry,
        )
        globals().update({
            "ProjectConfig": ProjectConfig,
            "ProjectRegistry": ProjectRegistry,
            "Resolution": Resolution,
            "TRACKED_PROJECTS": TRACKED_PROJECTS,
            "load_default_registry": load_default_registry,
            "load_registry": load_registry,
        })
        return globals()[name]

    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",

    # Normalizer
    "NAME_MAP",
    "Transformation",
    "normalize_project_name",
    "parse_project_names",
    "show_transformations",

    # Registry
    "ProjectConfig",
    "ProjectRegistry",
    "Resolution",
    "TRACKED_PROJECTS",
    "load_default_registry",
    "load_registry",

    # Exceptions
    "CveProjectsError",
    "RegistryError",
    "ValidationError",
]
