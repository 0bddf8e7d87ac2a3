#!/usr/bin/env python3
"""
YAMLVALID ENGINE - The Orchestrator
-----------------------------------
Runs one validation pass over a manifest source:
1. Read & compose (ManifestLoader), run-fatal on failure
2. Walk every top-level document through the PodValidator
3. Hand back the Reporter holding every diagnostic, in walk order

Author: YamlValid Team
Date: 2026-10-19
"""

import logging
from pathlib import Path
from typing import List, Optional

from yamlvalid.core.models import Node
from yamlvalid.core.reporter import Reporter
from yamlvalid.parsing.loader import ManifestLoader
from yamlvalid.validator.pod import PodValidator

logger = logging.getLogger("yamlvalid.engine")


class ValidationEngine:
    """
    Principal orchestrator. A fresh Reporter is created per run and shared
    by all documents of that source.
    """

    def __init__(self, loader: Optional[ManifestLoader] = None):
        self.loader = loader or ManifestLoader()

    def validate_file(self, path: Path, display_name: Optional[str] = None) -> Reporter:
        """
        Validates a manifest on disk. `display_name` is what diagnostics
        print as the file; it defaults to the path as given.
        Raises DocumentError if the file cannot be read or parsed.
        """
        name = display_name if display_name is not None else str(path)
        logger.info("validating %s", name)
        docs = self.loader.load(Path(path))
        return self.validate_documents(docs, name)

    def validate_text(self, content: str, file: str = "<string>") -> Reporter:
        docs = self.loader.load_string(content)
        return self.validate_documents(docs, file)

    def validate_documents(self, docs: List[Node], file: str) -> Reporter:
        reporter = Reporter(file)
        validator = PodValidator(reporter)
        for doc in docs:
            validator.validate(doc)

        logger.info("%s: %d document(s), %d diagnostic(s)", file, len(docs), len(reporter))
        return reporter
