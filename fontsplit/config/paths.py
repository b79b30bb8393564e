"""
Filesystem defaults and artifact naming constants.

Centralizes path definitions to avoid magic strings in individual modules.
"""

from pathlib import Path

INPUT_DIR = Path("src")
OUTPUT_DIR = Path("fonts")

# Extensions picked up by the directory scan (compared lower-cased)
FONT_EXTENSIONS = (".woff2", ".ttf", ".otf")

# Subset artifacts
SUBSET_FLAVOR = "woff2"
SUBSET_SUFFIX = ".woff2"

# CSS with relative URLs, and the variant pointing at an external base URL
CSS_SUFFIX = ".css"
REMOTE_CSS_SUFFIX = "@css.css"

MANIFEST_NAME = "fonts.json"

# Seconds before an external fontTools process is killed
SUBSET_TIMEOUT = 300.0
METADATA_TIMEOUT = 60.0
