#!/usr/bin/env python3
"""
YAMLVALID CORE MODELS
---------------------
Defines the fundamental data structures used across the validator.
A Node is the lowest level of manifest abstraction: the generic tree the
Loader produces and the schema validators walk.

Author: YamlValid Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


class NodeKind(Enum):
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


# Short names of the core YAML tags as stored on scalar nodes
STR_TAG = "str"
INT_TAG = "int"


@dataclass
class Node:
    """
    The atomic unit of a parsed manifest.

    Mapping children are (key, value) pairs in source order, duplicates kept.
    Sequence children are item nodes. Scalars have no children.
    """
    kind: NodeKind
    line: int                    # 1-based line in the source document
    tag: Optional[str] = None    # Scalars only: 'str', 'int', 'bool', 'null', ...
    value: str = ""              # Scalars only: the literal text
    children: List[Union["Node", Tuple["Node", "Node"]]] = field(default_factory=list)

    @property
    def is_mapping(self) -> bool:
        return self.kind is NodeKind.MAPPING

    @property
    def is_sequence(self) -> bool:
        return self.kind is NodeKind.SEQUENCE

    @property
    def is_scalar(self) -> bool:
        return self.kind is NodeKind.SCALAR

    @property
    def is_string(self) -> bool:
        """True for a scalar the parser resolved as a string."""
        return self.kind is NodeKind.SCALAR and self.tag == STR_TAG

    @property
    def pairs(self) -> List[Tuple["Node", "Node"]]:
        if self.kind is not NodeKind.MAPPING:
            raise TypeError(f"pairs requested on a {self.kind.value} node (line {self.line})")
        return self.children  # type: ignore[return-value]

    @property
    def items(self) -> List["Node"]:
        if self.kind is not NodeKind.SEQUENCE:
            raise TypeError(f"items requested on a {self.kind.value} node (line {self.line})")
        return self.children  # type: ignore[return-value]


@dataclass(frozen=True)
class Diagnostic:
    """
    One schema violation.

    A line of None means the violation has no source position, which only
    happens for a required field that is absent.
    """
    file: str
    line: Optional[int]
    message: str

    def format(self) -> str:
        if self.line is not None and self.line > 0:
            return f"{self.file}:{self.line} {self.message}"
        return f"{self.file}: {self.message}"
