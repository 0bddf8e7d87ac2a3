#!/usr/bin/env python3
"""
YAMLVALID REPORTER - The Scribe
-------------------------------
Accumulates diagnostics for a single validation run. Validators append,
the CLI flushes once traversal is complete. Nothing is ever sorted or
deduplicated: the order is the order of the schema walk.

Author: YamlValid Team
Date: 2026-10-19
"""

import logging
from typing import Callable, Iterator, List

from yamlvalid.core.models import Diagnostic

logger = logging.getLogger("yamlvalid.reporter")


class Reporter:
    """Collects structured diagnostics for one document (or one multi-document file)."""

    def __init__(self, file: str):
        self.file = file
        self._diagnostics: List[Diagnostic] = []

    def add(self, line: int, message: str) -> None:
        diagnostic = Diagnostic(file=self.file, line=line, message=message)
        logger.debug("diagnostic: %s", diagnostic.format())
        self._diagnostics.append(diagnostic)

    def add_required(self, field_path: str) -> None:
        """Reports an absent field. Absent fields have no source line."""
        diagnostic = Diagnostic(file=self.file, line=None, message=f"{field_path} is required")
        logger.debug("diagnostic: %s", diagnostic.format())
        self._diagnostics.append(diagnostic)

    def has_errors(self) -> bool:
        return bool(self._diagnostics)

    def flush(self, sink: Callable[[str], None]) -> None:
        for diagnostic in self._diagnostics:
            sink(diagnostic.format())

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)
