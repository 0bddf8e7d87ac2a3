from yamlvalid.core.models import Diagnostic
from yamlvalid.core.reporter import Reporter


def test_new_reporter_is_clean():
    reporter = Reporter("pod.yaml")
    assert not reporter.has_errors()
    assert len(reporter) == 0


def test_flush_formats_in_accumulation_order():
    reporter = Reporter("manifests/pod.yaml")
    reporter.add(12, "image has invalid format 'nginx'")
    reporter.add_required("metadata.name")
    reporter.add(3, "kind has unsupported value 'Deployment'")

    lines = []
    reporter.flush(lines.append)

    assert reporter.has_errors()
    assert lines == [
        "manifests/pod.yaml:12 image has invalid format 'nginx'",
        "manifests/pod.yaml: metadata.name is required",
        "manifests/pod.yaml:3 kind has unsupported value 'Deployment'",
    ]


def test_identical_diagnostics_are_not_deduplicated():
    reporter = Reporter("pod.yaml")
    reporter.add(7, "name has invalid format 'duplicate'")
    reporter.add(7, "name has invalid format 'duplicate'")
    assert len(reporter) == 2


def test_required_diagnostic_has_no_line():
    reporter = Reporter("pod.yaml")
    reporter.add_required("spec")
    diagnostic, = reporter
    assert diagnostic == Diagnostic(file="pod.yaml", line=None, message="spec is required")
    assert diagnostic.format() == "pod.yaml: spec is required"


def test_diagnostics_are_exposed_only_through_iteration():
    reporter = Reporter("pod.yaml")
    reporter.add(1, "root must be object")
    assert not hasattr(reporter, "diagnostics")
    assert [d.message for d in reporter] == ["root must be object"]


def test_flush_does_not_consume():
    reporter = Reporter("pod.yaml")
    reporter.add(1, "root must be object")
    first, second = [], []
    reporter.flush(first.append)
    reporter.flush(second.append)
    assert first == second == ["pod.yaml:1 root must be object"]
