#!/usr/bin/env python3
"""
YAMLVALID POD VALIDATOR - The Judge
-----------------------------------
Entry point of the schema walk. Checks a top-level document as a Pod and
descends into ObjectMeta and PodSpec, handing each container over to the
ContainerValidator.

Every sibling field is checked independently: a broken field never stops
the rest of the document from being inspected. Descent only stops where the
node kind makes it impossible.

Author: YamlValid Team
Date: 2026-10-19
"""

import logging
from typing import Set

from yamlvalid.core.accessors import get_field
from yamlvalid.core.models import Node
from yamlvalid.core.reporter import Reporter
from yamlvalid.validator import schema
from yamlvalid.validator.container import ContainerValidator

logger = logging.getLogger("yamlvalid.validator")


class PodValidator:
    """
    Validates documents against the Pod schema, writing every violation
    into the shared Reporter.
    """

    def __init__(self, reporter: Reporter):
        self.reporter = reporter
        self.containers = ContainerValidator(reporter)

    def validate(self, doc: Node) -> None:
        if not doc.is_mapping:
            self.reporter.add(doc.line, "root must be object")
            return

        logger.debug("validating document starting at line %d", doc.line)
        self._check_literal(doc, "apiVersion", schema.API_VERSION)
        self._check_literal(doc, "kind", schema.KIND)

        metadata, found = get_field(doc, "metadata")
        if not found:
            self.reporter.add_required("metadata")
        elif not metadata.is_mapping:
            self.reporter.add(metadata.line, "metadata must be object")
        else:
            self._validate_object_meta(metadata)

        spec, found = get_field(doc, "spec")
        if not found:
            self.reporter.add_required("spec")
        elif not spec.is_mapping:
            self.reporter.add(spec.line, "spec must be object")
        else:
            self._validate_pod_spec(spec)

    def _check_literal(self, doc: Node, field: str, expected: str) -> None:
        """Required string field that only admits one value."""
        node, found = get_field(doc, field)
        if not found:
            self.reporter.add_required(field)
        elif not node.is_string:
            self.reporter.add(node.line, f"{field} must be string")
        elif node.value != expected:
            self.reporter.add(node.line, f"{field} has unsupported value '{node.value}'")

    # --- ObjectMeta ---

    def _validate_object_meta(self, meta: Node) -> None:
        name, found = get_field(meta, "name")
        if not found:
            self.reporter.add_required("metadata.name")
        elif not name.is_string:
            self.reporter.add(name.line, "name must be string")
        elif not name.value.strip():
            # Present but blank counts as missing, yet it has a position
            self.reporter.add(name.line, "name is required")

        namespace, found = get_field(meta, "namespace")
        if found and not namespace.is_string:
            self.reporter.add(namespace.line, "namespace must be string")

        labels, found = get_field(meta, "labels")
        if not found:
            return
        if not labels.is_mapping:
            self.reporter.add(labels.line, "labels must be object")
            return
        for key, value in labels.pairs:
            if not value.is_string:
                self.reporter.add(value.line, "labels value must be string")
            if not key.is_string:
                self.reporter.add(key.line, "labels key must be string")

    # --- PodSpec ---

    def _validate_pod_spec(self, spec: Node) -> None:
        os_node, found = get_field(spec, "os")
        if found:
            self._validate_os(os_node)

        containers, found = get_field(spec, "containers")
        if not found:
            self.reporter.add_required("spec.containers")
            return
        if not containers.is_sequence:
            self.reporter.add(containers.line, "containers must be array")
            return
        if not containers.items:
            self.reporter.add(containers.line, "containers value out of range")

        # Container names must be unique within one Pod
        seen_names: Set[str] = set()
        for item in containers.items:
            if not item.is_mapping:
                self.reporter.add(item.line, "container must be object")
                continue
            self.containers.validate(item, seen_names)

    def _validate_os(self, os_node: Node) -> None:
        """
        `os` is either a bare string (os: linux) or an object with a name
        (os: {name: linux}). Both shapes end in the same enum check.
        """
        if os_node.is_scalar:
            if not os_node.is_string:
                self.reporter.add(os_node.line, "os must be string")
                return
            name = os_node
        elif os_node.is_mapping:
            name, found = get_field(os_node, "name")
            if not found:
                self.reporter.add_required("spec.os.name")
                return
            if not name.is_string:
                self.reporter.add(name.line, "os.name must be string")
                return
        else:
            self.reporter.add(os_node.line, "os must be string or object")
            return

        if name.value not in schema.VALID_OS:
            self.reporter.add(name.line, f"os has unsupported value '{name.value}'")
