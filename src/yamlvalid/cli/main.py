#!/usr/bin/env python3
"""
YAMLVALID CLI - Pre-Flight Check
--------------------------------
Command-line interface around the ValidationEngine.

Exit codes:
  0  manifest is valid
  1  schema violations found, or the file could not be read/parsed
  2  invalid invocation (argparse usage error)

Author: YamlValid Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from yamlvalid.cli.formatter import DiagnosticFormatter
from yamlvalid.core.engine import ValidationEngine
from yamlvalid.parsing.loader import DocumentError

VERSION = "yamlvalid v1.0.0"

EXIT_OK = 0
EXIT_INVALID = 1


class YamlValidCLI:
    """
    CLI wrapper that translates the single path argument into an Engine run
    and maps the outcome onto an exit status.
    """

    def __init__(self, formatter: Optional[DiagnosticFormatter] = None):
        self.formatter = formatter or DiagnosticFormatter()
        self.parser = argparse.ArgumentParser(
            prog="yamlvalid",
            description="yamlvalid - Pod manifest pre-flight validator",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="Diagnostics are written to stderr as <file>:<line> <message>.",
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the positional path and the optional flags."""
        self.parser.add_argument("path", help="Path to the YAML manifest to validate")
        self.parser.add_argument("--version", action="version", version=VERSION)
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
        self.parser.add_argument("--summary", action="store_true", help="Render a summary table after the diagnostics")

    def _configure_logging(self, verbose: bool):
        level = logging.DEBUG if verbose else logging.WARNING
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("yamlvalid").setLevel(level)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point. Returns the process exit status."""
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)

        engine = ValidationEngine()
        try:
            reporter = engine.validate_file(Path(args.path), display_name=args.path)
        except DocumentError as e:
            self.formatter.print_error(str(e))
            return EXIT_INVALID

        self.formatter.print_diagnostics(reporter)
        if args.summary:
            self.formatter.print_summary(reporter)

        return EXIT_INVALID if reporter.has_errors() else EXIT_OK


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(YamlValidCLI().run())
    except KeyboardInterrupt:
        DiagnosticFormatter().print_error("Terminated by user.")
        sys.exit(EXIT_INVALID)


if __name__ == "__main__":
    main()
