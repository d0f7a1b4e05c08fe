"""Place of record for the package version"""

__version__ = "1.0.0"
