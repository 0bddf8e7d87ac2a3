"""
YAMLVALID SCHEMA CATALOG
------------------------
The fixed constraints of the Pod schema. The validators encode the shape of
each entity directly; this module only holds the values they compare against.
"""

import re

API_VERSION = "v1"
KIND = "Pod"

# Container names: snake_case
NAME_PATTERN = re.compile(r"[a-z][a-z0-9_]*")

# Images must come from the internal registry and carry an explicit tag
IMAGE_PATTERN = re.compile(r"registry\.bigbrother\.io/.+:.+")

# Integer quantity with a binary unit suffix
MEMORY_PATTERN = re.compile(r"[0-9]+(Gi|Mi|Ki)")

VALID_OS = frozenset({"linux", "windows"})
VALID_PROTOCOLS = frozenset({"TCP", "UDP"})

MIN_PORT = 1
MAX_PORT = 65535
MIN_CPU = 0
