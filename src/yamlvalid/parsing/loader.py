#!/usr/bin/env python3
"""
YAMLVALID LOADER - The Cartographer
-----------------------------------
Turns raw manifest text into the generic Node tree consumed by the schema
validators. Parsing is delegated to ruamel.yaml's composer, which keeps the
resolved tag and start mark of every node; no Python objects are constructed,
so duplicate keys and tag information survive untouched.

Author: YamlValid Team
Date: 2026-10-19
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from ruamel.yaml import YAML, YAMLError
from ruamel.yaml.nodes import MappingNode, ScalarNode, SequenceNode

from yamlvalid.core.models import Node, NodeKind

logger = logging.getLogger("yamlvalid.loader")

_CORE_TAG_PREFIX = "tag:yaml.org,2002:"


class DocumentError(Exception):
    """
    Raised when a source cannot be turned into documents at all
    (unreadable, undecodable, malformed or empty). Run-fatal: no schema
    diagnostics are produced for such a source.
    """


class ManifestLoader:
    """
    Composes every YAML document of a stream into a Node tree.
    One top-level Node is returned per document, in stream order.
    """

    def __init__(self):
        self.yaml = YAML()

    def load(self, path: Path) -> List[Node]:
        """Reads a manifest from disk (BOM-aware) and composes it."""
        try:
            content = Path(path).read_bytes().decode("utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentError(f"cannot read file: {e}") from e
        return self.load_string(content)

    def load_string(self, content: str) -> List[Node]:
        try:
            raw_docs = list(self.yaml.compose_all(content))
        except YAMLError as e:
            raise DocumentError(f"cannot unmarshal file content: {e}") from e

        docs = [doc for doc in raw_docs if doc is not None]
        if not docs:
            raise DocumentError("cannot unmarshal file content: empty document")

        logger.debug("composed %d document(s)", len(docs))
        memo: Dict[int, Node] = {}
        return [self._convert(doc, memo) for doc in docs]

    def _convert(self, raw, memo: Dict[int, Node], key_line: Optional[int] = None) -> Node:
        """
        Maps a ruamel representation node onto a Node.
        Aliases point at the same representation node, so conversions are
        shared through `memo` instead of being expanded again.

        `key_line` is the line of the owning key when `raw` is a mapping value.
        """
        cached = memo.get(id(raw))
        if cached is not None:
            return cached

        line = raw.start_mark.line + 1

        if isinstance(raw, ScalarNode):
            if key_line is not None and self._is_empty_value(raw):
                # The parser marks an omitted value at the next token, which
                # sits on a later line; the value belongs to its key's line
                line = key_line
            node = Node(kind=NodeKind.SCALAR, line=line, tag=self._short_tag(raw.tag), value=raw.value)
            memo[id(raw)] = node
            return node

        if isinstance(raw, MappingNode):
            node = Node(kind=NodeKind.MAPPING, line=line)
            memo[id(raw)] = node
            for k, v in raw.value:
                key = self._convert(k, memo)
                node.children.append((key, self._convert(v, memo, key_line=key.line)))
            return node

        if isinstance(raw, SequenceNode):
            node = Node(kind=NodeKind.SEQUENCE, line=line)
            memo[id(raw)] = node
            node.children = [self._convert(item, memo) for item in raw.value]
            return node

        raise TypeError(f"unexpected representation node {type(raw).__name__}")

    @staticmethod
    def _is_empty_value(raw: ScalarNode) -> bool:
        """A plain scalar with no text at all, i.e. `key:` with nothing after it."""
        return raw.value == "" and raw.style is None

    @staticmethod
    def _short_tag(tag) -> str:
        # Newer ruamel.yaml releases wrap tags in a Tag object
        text = str(tag) if tag is not None else ""
        if text.startswith(_CORE_TAG_PREFIX):
            return text[len(_CORE_TAG_PREFIX):]
        return text
