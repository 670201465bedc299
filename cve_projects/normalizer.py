"""
Project name normalization.

Turns human-typed project names ("Node", "k8s", "Postgres") into the
canonical keys used by the project registry:
- Alias table mapping common spellings onto canonical keys
- Single-name normalization with a best-effort fallback for unknown names
- Multi-line parsing (deduplicated) and a per-line transformation view

All functions are total: invalid input yields an empty result, never an
exception.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Dict, List, NamedTuple

# Characters outside this class are stripped before alias lookup
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")

# Alias -> canonical key. Canonical keys map to themselves.
NAME_MAP = MappingProxyType({
    # Runtimes & languages
    "nodejs": "nodejs",
    "node": "nodejs",
    "python3": "python3",
    "python": "python3",
    "golang": "golang",
    "go": "golang",
    "java": "java",
    "openjdk": "java",
    "php": "php",
    "perl": "perl",
    "ruby": "ruby",
    "rust": "rust",
    "lua": "lua",
    "dotnet": "dotnet",
    ".net": "dotnet",
    "bun": "bun",
    "deno": "deno",
    "v8": "v8",

    # Web servers & proxies
    "apache": "apache",
    "httpd": "apache",
    "nginx": "nginx",
    "tomcat": "tomcat",
    "caddy": "caddy",
    "traefik": "traefik",
    "haproxy": "haproxy",

    # Databases & caching
    "postgresql": "postgresql",
    "postgres": "postgresql",
    "mysql": "mysql",
    "mariadb": "mysql",
    "redis": "redis",
    "memcached": "memcached",
    "memcache": "memcached",
    "mongodb": "mongodb",
    "mongo": "mongodb",
    "elasticsearch": "elasticsearch",
    "elastic": "elasticsearch",
    "sqlite": "sqlite",
    "cassandra": "cassandra",

    # Messaging
    "rabbitmq": "rabbitmq",
    "rabbit": "rabbitmq",
    "kafka": "kafka",
    "nats": "nats",
    "activemq": "activemq",

    # Frameworks
    "fastapi": "fastapi",
    "django": "django",
    "flask": "flask",
    "express": "express",
    "react": "react",
    "angular": "angular",
    "vue": "vue",
    "laravel": "laravel",
    "rails": "rails",
    "spring": "spring",

    # Build & dev tooling
    "maven": "maven",
    "gradle": "gradle",
    "npm": "npm",
    "jenkins": "jenkins",
    "gitlab": "gitlab",
    "git": "git",
    "vim": "vim",

    # Containers & system tools
    "docker": "docker",
    "kubernetes": "kubernetes",
    "k8s": "kubernetes",
    "bash": "bash",
    "sh": "bash",
    "busybox": "busybox",
    "openssl": "openssl",
    "ssl": "openssl",
    "curl": "curl",
    "fluentbit": "fluentbit",

    # Observability
    "prometheus": "prometheus",
    "grafana": "grafana",
    "jaeger": "jaeger",
    "zipkin": "zipkin",

    # Operating systems
    "ubuntu": "ubuntu",
    "debian": "debian",
    "alpine": "alpine",
    "centos": "centos",
    "fedora": "fedora",
    "linux": "linux",
})


class Transformation(NamedTuple):
    """How one input line was interpreted."""

    original: str
    normalized: str

    def to_dict(self) -> Dict[str, str]:
        return {"original": self.original, "normalized": self.normalized}


def normalize_project_name(name: Any) -> str:
    """
    Normalize a raw project name to its canonical registry key.

    Lookup order (first hit wins):
    1. alias table, using the lowercase alphanumeric form
    2. alias table, using the trimmed lowercase form (punctuated aliases)
    3. the lowercase alphanumeric form itself

    Args:
        name: Raw project name, usually user input

    Returns:
        Canonical key, or "" when `name` is not a non-empty string

    Example:
        >>> normalize_project_name("Node.js")
        'nodejs'
        >>> normalize_project_name("  POSTGRES  ")
        'postgresql'
        >>> normalize_project_name("SomeRandomTool!!")
        'somerandomtool'
    """
    if not name or not isinstance(name, str):
        return ""

    cleaned = name.strip().lower()
    stripped = _NON_ALNUM_RE.sub("", cleaned)

    return NAME_MAP.get(stripped) or NAME_MAP.get(cleaned) or stripped


def _split_lines(raw_text: Any) -> List[str]:
    if not raw_text or not isinstance(raw_text, str):
        return []
    return [line.strip() for line in raw_text.split("\n") if line.strip()]


def parse_project_names(raw_text: Any) -> List[str]:
    """
    Parse newline-separated project names into unique canonical keys.

    Blank lines and names that normalize to nothing are dropped. Keys keep
    the order in which they first appear.

    Args:
        raw_text: Multi-line text, one project name per line

    Returns:
        List of canonical keys without duplicates

    Example:
        >>> parse_project_names("node\\nNode.js\\n\\n  Python  \\npostgres")
        ['nodejs', 'python3', 'postgresql']
    """
    keys: List[str] = []
    seen = set()
    for line in _split_lines(raw_text):
        key = normalize_project_name(line)
        if key and key not in seen:
            seen.add(key)
            keys.append(key)
    return keys


def show_transformations(raw_text: Any) -> List[Transformation]:
    """
    Pair every input line with its canonical key.

    Unlike parse_project_names() this keeps one record per line, even when
    several lines resolve to the same key.

    Args:
        raw_text: Multi-line text, one project name per line

    Returns:
        List of Transformation(original, normalized) records
    """
    records = (Transformation(line, normalize_project_name(line)) for line in _split_lines(raw_text))
    return [record for record in records if record.normalized]
