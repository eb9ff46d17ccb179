"""Application-wide constants."""

import re
from pathlib import Path

# Application metadata
APP_NAME = "gboard_dictionary"
APP_VERSION = "0.1.0"

# Paths
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "default_config.yaml"
USER_DATA_DIR = Path.home() / ".gboard_dictionary"

# Environment
DICTIONARY_PATH_ENV = "GBOARD_DICTIONARY_PATH"

# File format
FILE_HEADER = "# Gboard Dictionary version:1"
FILE_WITH_CATEGORIES_HEADER = "# Gboard Dictionary with categories version:1"

# This character is a horizontal tab, not a regular space.
SEPARATOR = "\t"

DEFAULT_ENCODING = "utf-8"

# Record validation
LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2}(-[A-Z]{2})?$")
MAX_FIELD_LENGTH = 100
