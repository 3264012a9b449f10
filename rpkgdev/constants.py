"""Global constants for rpkgdev"""

import re

APP_NAME = "rpkgdev"
LOG_FORMAT = "%(message)s"

# Package naming
PACKAGE_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9.]*$")

# Skeleton directories created in every new package, relative to its root
SKELETON_DIRS = [
    "R",
    "man",
    "tests/testthat",
    "vignettes/articles",
    "data",
    "inst",
]

# Template files stored without their leading dot so they survive packaging
DOTFILE_NAMES = {
    "gitignore": ".gitignore",
    "Rbuildignore": ".Rbuildignore",
    "Rprofile": ".Rprofile",
    "lintr": ".lintr",
}

# Placeholder substituted in copied template text files
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")

# Descriptor defaults
DEFAULT_VERSION = "0.0.0.9000"
DEFAULT_TITLE = "What the Package Does (One Line, Title Case)"
DEFAULT_DESCRIPTION = "What the package does (one paragraph)."
DEFAULT_AUTHOR_GIVEN = "First"
DEFAULT_AUTHOR_FAMILY = "Last"
DEFAULT_AUTHOR_EMAIL = "first.last@example.com"
DEFAULT_LICENSE = "MIT + file LICENSE"

# Configuration
USER_CONFIG_FILE = ".rpkgdev.yaml"
ENV_CONFIG_PATH = "RPKGDEV_CONFIG"

# External tools
GIT_EXECUTABLE = "git"
RSTUDIO_EXECUTABLE = "rstudio"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_WARNING = "⚠"
EMOJI_INFO = "ℹ"

NEXT_STEPS = [
    "Edit DESCRIPTION with your package details",
    "Read FIRST-TIME-CHECKLIST.md for customization guide",
    "Start developing in R/",
    "Run devtools::load_all() to load your package",
]
