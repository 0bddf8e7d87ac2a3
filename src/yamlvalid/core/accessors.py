#!/usr/bin/env python3
"""
YAMLVALID ACCESSORS
-------------------
Read-only helpers the schema validators use to look into the node tree:
field lookup inside mappings and integer coercion of scalars.

Author: YamlValid Team
Date: 2026-10-19
"""

import re
from typing import Optional, Tuple

from yamlvalid.core.models import Node, INT_TAG, STR_TAG

# Base-10 literal, ASCII digits only (no underscores, no radix prefixes)
_DECIMAL_PATTERN = re.compile(r"[-+]?[0-9]+")

# Integers are signed 64-bit; anything wider is not an integer
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def get_field(mapping: Node, key: str) -> Tuple[Optional[Node], bool]:
    """
    Returns the value node of the first pair whose key scalar equals `key`.
    A non-mapping node, or a mapping without the key, yields (None, False).
    """
    if not mapping.is_mapping:
        return None, False
    for key_node, value_node in mapping.pairs:
        if key_node.is_scalar and key_node.value == key:
            return value_node, True
    return None, False


def as_int(node: Node) -> Tuple[Optional[int], int]:
    """
    Interprets a scalar as an integer.

    Accepts native integers and strings holding a decimal literal (surrounding
    whitespace ignored). Returns (value, line); value is None when the node
    is not an integer or does not fit in a signed 64-bit range.
    """
    if not node.is_scalar:
        return None, node.line

    if node.tag == INT_TAG:
        text = node.value
    elif node.tag == STR_TAG:
        text = node.value.strip()
    else:
        return None, node.line

    if not _DECIMAL_PATTERN.fullmatch(text):
        return None, node.line
    value = int(text, 10)
    if not INT64_MIN <= value <= INT64_MAX:
        return None, node.line
    return value, node.line
