import textwrap

import pytest

from yamlvalid.core.engine import ValidationEngine


def _manifest(text: str) -> str:
    # First line of the literal becomes line 1
    return textwrap.dedent(text).lstrip("\n")


VALID_POD = _manifest("""
    apiVersion: v1
    kind: Pod
    metadata:
      name: app
    spec:
      containers:
        - name: web
          image: registry.bigbrother.io/app:1.0
          resources: {}
""")


@pytest.fixture
def valid_pod() -> str:
    return VALID_POD


@pytest.fixture
def manifest():
    return _manifest


@pytest.fixture
def validate():
    """Runs the engine on inline YAML and returns [(line, message), ...]."""
    engine = ValidationEngine()

    def _validate(text: str):
        reporter = engine.validate_text(_manifest(text), "pod.yaml")
        return [(d.line, d.message) for d in reporter]

    return _validate
