"""Version information for cve-projects."""

__version__ = "0.3.0"
__version_info__ = tuple(int(i) for i in __version__.split("."))

__title__ = "cve-projects"
__description__ = "Project name normalizer and CPE/keyword registry for CVE matching"
__author__ = "CVE Projects Team"
__license__ = "MIT"
