"""Constants for autoform"""

import re

# ==================== Inference ====================
DEFAULT_MAX_DEPTH = 10

# ==================== String Patterns ====================
# Checked in this order with search(); the first match wins.
EMAIL_PATTERN = re.compile(r"@[^@]*\.")
URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
ISO_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}")

# ==================== Label Humanization ====================
SEPARATOR_PATTERN = re.compile(r"[_\-\s]+")
CAMEL_BOUNDARY_PATTERN = re.compile(r"([a-z0-9])([A-Z])")
ACRONYM_BOUNDARY_PATTERN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# ==================== Introspection ====================
# Keys of a metadata bag that map onto descriptor UI slots
UI_METADATA_KEYS = ("unit", "section", "placeholder", "component")
# Subset of UI_METADATA_KEYS whose descriptor slots hold text
TEXT_METADATA_KEYS = ("unit", "section", "placeholder")

# Name of the synthetic descriptor wrapping a scalar array item
SCALAR_ITEM_NAME = "value"

# ==================== Configuration ====================
CONFIG_FILE_DEFAULT = "autoform.toml"
ENV_PREFIX = "AUTOFORM_"
ENV_NESTED_DELIMITER = "__"

# ==================== Logging ====================
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 10
