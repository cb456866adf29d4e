"""roslint - RouterOS script linter and syntax validator."""

from roslint.constants import VERSION

__version__ = VERSION
