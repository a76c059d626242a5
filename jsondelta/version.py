"""
jsondelta version constants.

Kept in one place so the CLI ``--version`` flag and the package metadata
agree.
"""

# Library version (matches pyproject.toml)
JSONDELTA_VERSION = "0.1.0"
