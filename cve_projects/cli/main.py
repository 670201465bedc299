"""
Main CLI entry point for cve-projects.

Provides commands to normalize project names, show how each input line is
interpreted and inspect the project registry, with optional YAML
configuration.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from colorama import Fore, Style, just_fix_windows_console

from ..__version__ import __version__
from ..exceptions import CveProjectsError, ValidationError
from ..normalizer import normalize_project_name, parse_project_names, show_transformations
from ..registry import load_registry
from .config import create_default_config, load_config, merge_config, validate_config

just_fix_windows_console()


def print_ok(msg):
    """Print success message in green."""
    print(f"{Fore.GREEN}[OK] {msg}{Style.RESET_ALL}")


def print_error(msg):
    """Print error message in red."""
    print(f"{Fore.RED}[ERROR] {msg}{Style.RESET_ALL}", file=sys.stderr)


def print_warn(msg):
    """Print warning message in yellow."""
    print(f"{Fore.YELLOW}[WARN] {msg}{Style.RESET_ALL}", file=sys.stderr)


def print_info(msg):
    """Print info message in cyan."""
    print(f"{Fore.CYAN}[INFO] {msg}{Style.RESET_ALL}")


def print_json(data):
    print(json.dumps(data, indent=2))


def setup_logging(level: str = "WARNING"):
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="[%(asctime)s] %(message)s",
    )


def load_settings(args) -> dict:
    """
    Merge the YAML config (if any) with command-line overrides.

    Raises:
        FileNotFoundError: If --config points to a missing file
        ValidationError: If the config is invalid
    """
    config = load_config(args.config) if args.config else {}
    settings = merge_config(config)
    validate_config(settings)

    if args.registry:
        settings["registry"]["path"] = args.registry
    if args.json:
        settings["output"]["format"] = "json"
    if args.verbose:
        settings["logging"]["level"] = "DEBUG"
    return settings


def read_input(path: Optional[str]) -> str:
    """Read names from `path`, or stdin when path is None or '-'."""
    if not path or path == "-":
        return sys.stdin.read()
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ValidationError(f"Input file is not valid UTF-8: {path} ({e})") from e


def cmd_normalize(args, settings):
    """Normalize names given on the command line."""
    results = [{"original": name, "normalized": normalize_project_name(name)} for name in args.names]

    if settings["output"]["format"] == "json":
        print_json(results)
        return 0

    for item in results:
        if item["normalized"]:
            print(f"{item['original']} -> {Fore.GREEN}{item['normalized']}{Style.RESET_ALL}")
        else:
            print_warn(f"'{item['original']}' does not contain a project name")
    return 0


def cmd_parse(args, settings):
    """Parse a list of names (one per line) into unique canonical keys."""
    keys = parse_project_names(read_input(args.file))
    registry = load_registry(settings["registry"]["path"])
    unknown = [key for key in keys if key not in registry]
    if args.known_only:
        keys = [key for key in keys if key in registry]

    if settings["output"]["format"] == "json":
        print_json({"projects": keys, "unknown": unknown})
        return 0

    for key in keys:
        print(key)
    if unknown:
        print_warn(f"Not in registry: {', '.join(unknown)}")
    return 0


def cmd_show(args, settings):
    """Show how each input line was interpreted."""
    records = show_transformations(read_input(args.file))

    if settings["output"]["format"] == "json":
        print_json([record.to_dict() for record in records])
        return 0

    if not records:
        print_warn("No project names found in input")
        return 0
    width = max(len(record.original) for record in records)
    for record in records:
        print(f"{record.original:<{width}} -> {Fore.GREEN}{record.normalized}{Style.RESET_ALL}")
    return 0


def cmd_lookup(args, settings):
    """Show registry entry for a project name."""
    registry = load_registry(settings["registry"]["path"])
    project = registry.lookup(args.name)
    if project is None:
        print_error(f"Project not tracked: {args.name} (normalized: {normalize_project_name(args.name) or '-'})")
        return 1

    if settings["output"]["format"] == "json":
        print_json({project.key: project.to_dict()})
        return 0

    print(f"{Fore.CYAN}{project.name}{Style.RESET_ALL} ({project.key})")
    print("  CPE patterns:")
    for pattern in project.cpe_patterns:
        print(f"    {pattern}")
    print("  Description keywords:")
    for keyword in project.description_keywords:
        print(f"    {keyword}")
    return 0


def cmd_list(args, settings):
    """List tracked projects."""
    registry = load_registry(settings["registry"]["path"])

    if settings["output"]["format"] == "json":
        print_json({key: project.name for key, project in registry.items()})
        return 0

    for key, project in registry.items():
        print(f"  {Fore.YELLOW}{key:<14}{Style.RESET_ALL} {project.name}")
    print_info(f"{len(registry)} tracked projects")
    return 0


def cmd_init_config(args, settings):
    """Create default configuration file."""
    output = args.output or "cve-projects.yaml"
    create_default_config(output)
    print_ok(f"Created configuration file: {output}")
    print_info(f"Use it with: cve-projects --config {output} <command>")
    return 0


def cmd_version(args, settings):
    """Show version information."""
    from ..__version__ import __title__, __description__
    print(f"{Fore.CYAN}{__title__}{Style.RESET_ALL} v{Fore.GREEN}{__version__}{Style.RESET_ALL}")
    print(__description__)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cve-projects",
        description="Normalize project names and inspect CVE matching metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--config", "-c", help="YAML configuration file")
    parser.add_argument("--registry", help="Custom registry file (.json or .yaml)")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    normalize_parser = subparsers.add_parser("normalize", help="Normalize project names")
    normalize_parser.add_argument("names", nargs="+", help="Project names to normalize")
    normalize_parser.set_defaults(func=cmd_normalize)

    parse_parser = subparsers.add_parser("parse", help="Parse a name list into unique project keys")
    parse_parser.add_argument("file", nargs="?", help="File with one name per line (default: stdin)")
    parse_parser.add_argument("--known-only", action="store_true", help="Only print keys tracked in the registry")
    parse_parser.set_defaults(func=cmd_parse)

    show_parser = subparsers.add_parser("show", help="Show how each input line is interpreted")
    show_parser.add_argument("file", nargs="?", help="File with one name per line (default: stdin)")
    show_parser.set_defaults(func=cmd_show)

    lookup_parser = subparsers.add_parser("lookup", help="Show registry entry for a project")
    lookup_parser.add_argument("name", help="Project name (any known alias)")
    lookup_parser.set_defaults(func=cmd_lookup)

    list_parser = subparsers.add_parser("list", help="List tracked projects")
    list_parser.set_defaults(func=cmd_list)

    config_parser = subparsers.add_parser("init-config", help="Create default configuration file")
    config_parser.add_argument("--output", "-o", help="Output config file path")
    config_parser.set_defaults(func=cmd_init_config)

    version_parser = subparsers.add_parser("version", help="Show version information")
    version_parser.set_defaults(func=cmd_version)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        settings = load_settings(args)
        setup_logging(settings["logging"]["level"])
        return args.func(args, settings)
    except (CveProjectsError, OSError) as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
