#!/usr/bin/env python3
"""
YAMLVALID CONTAINER VALIDATOR
-----------------------------
Checks a single container entry of a Pod: identity (name, image), ports,
HTTP probes and resource requirements.

Author: YamlValid Team
Date: 2026-10-19
"""

from typing import Set

from yamlvalid.core.accessors import as_int, get_field
from yamlvalid.core.models import Node
from yamlvalid.core.reporter import Reporter
from yamlvalid.validator import schema


class ContainerValidator:
    """
    Validates Container, ContainerPort, Probe and ResourceRequirements
    entities. Stateless apart from the Reporter it writes to; name
    uniqueness is tracked by the caller's `seen_names` set.
    """

    def __init__(self, reporter: Reporter):
        self.reporter = reporter

    def validate(self, container: Node, seen_names: Set[str]) -> None:
        self._validate_name(container, seen_names)

        image, found = get_field(container, "image")
        if not found:
            self.reporter.add_required("containers.image")
        elif not image.is_string:
            self.reporter.add(image.line, "image must be string")
        elif not schema.IMAGE_PATTERN.fullmatch(image.value):
            self.reporter.add(image.line, f"image has invalid format '{image.value}'")

        ports, found = get_field(container, "ports")
        if found:
            if not ports.is_sequence:
                self.reporter.add(ports.line, "ports must be array")
            else:
                for port in ports.items:
                    if not port.is_mapping:
                        self.reporter.add(port.line, "ports item must be object")
                        continue
                    self._validate_port(port)

        for probe_field in ("readinessProbe", "livenessProbe"):
            probe, found = get_field(container, probe_field)
            if found:
                self._validate_probe(probe, probe_field)

        resources, found = get_field(container, "resources")
        if not found:
            self.reporter.add_required("containers.resources")
        else:
            self._validate_resources(resources)

    def _validate_name(self, container: Node, seen_names: Set[str]) -> None:
        name, found = get_field(container, "name")
        if not found:
            self.reporter.add_required("containers.name")
            return
        if not name.is_string:
            self.reporter.add(name.line, "name must be string")
            return
        if not name.value.strip():
            self.reporter.add(name.line, "name is required")
            return
        if not schema.NAME_PATTERN.fullmatch(name.value):
            self.reporter.add(name.line, f"name has invalid format '{name.value}'")
            return

        if name.value in seen_names:
            self.reporter.add(name.line, "name has invalid format 'duplicate'")
        seen_names.add(name.value)

    # --- ContainerPort ---

    def _validate_port(self, port: Node) -> None:
        container_port, found = get_field(port, "containerPort")
        if not found:
            self.reporter.add_required("ports.containerPort")
        else:
            self._check_port_number(container_port, "containerPort")

        protocol, found = get_field(port, "protocol")
        if found:
            if not protocol.is_string:
                self.reporter.add(protocol.line, "protocol must be string")
            elif protocol.value not in schema.VALID_PROTOCOLS:
                self.reporter.add(protocol.line, f"protocol has unsupported value '{protocol.value}'")

    def _check_port_number(self, node: Node, field: str) -> None:
        value, line = as_int(node)
        if value is None:
            self.reporter.add(line, f"{field} must be int")
        elif not schema.MIN_PORT <= value <= schema.MAX_PORT:
            self.reporter.add(line, f"{field} value out of range")

    # --- Probe ---

    def _validate_probe(self, probe: Node, prefix: str) -> None:
        if not probe.is_mapping:
            self.reporter.add(probe.line, f"{prefix} must be object")
            return

        http_get, found = get_field(probe, "httpGet")
        if not found:
            self.reporter.add_required(f"{prefix}.httpGet")
            return
        if not http_get.is_mapping:
            self.reporter.add(http_get.line, "httpGet must be object")
            return

        path, found = get_field(http_get, "path")
        if not found:
            self.reporter.add_required(f"{prefix}.httpGet.path")
        elif not path.is_string:
            self.reporter.add(path.line, "path must be string")
        elif not path.value.startswith("/"):
            self.reporter.add(path.line, f"path has invalid format '{path.value}'")

        port, found = get_field(http_get, "port")
        if not found:
            self.reporter.add_required(f"{prefix}.httpGet.port")
        else:
            self._check_port_number(port, "port")

    # --- ResourceRequirements ---

    def _validate_resources(self, resources: Node) -> None:
        if not resources.is_mapping:
            self.reporter.add(resources.line, "resources must be object")
            return

        for section in ("limits", "requests"):
            node, found = get_field(resources, section)
            if found:
                self._validate_resource_kv(node, f"resources.{section}")

    def _validate_resource_kv(self, node: Node, prefix: str) -> None:
        """
        cpu and memory are both optional; unknown keys are ignored.
        Every pair is visited, so a repeated key is checked each time.
        """
        if not node.is_mapping:
            self.reporter.add(node.line, f"{prefix} must be object")
            return

        for key, value in node.pairs:
            if not key.is_string:
                self.reporter.add(key.line, f"{prefix} key must be string")
                continue

            if key.value == "cpu":
                cpu, line = as_int(value)
                if cpu is None:
                    self.reporter.add(line, "cpu must be int")
                elif cpu < schema.MIN_CPU:
                    self.reporter.add(line, "cpu value out of range")
            elif key.value == "memory":
                if not value.is_string:
                    self.reporter.add(value.line, "memory must be string")
                elif not schema.MEMORY_PATTERN.fullmatch(value.value):
                    self.reporter.add(value.line, f"{prefix}.memory has invalid format '{value.value}'")
