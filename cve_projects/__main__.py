#!/usr/bin/env python3
"""
Entry point script for cve-projects CLI.
Can be used directly: python -m cve_projects
"""

if __name__ == "__main__":
    from cve_projects.cli.main import main
    import sys
    sys.exit(main())
