from __future__ import annotations

import pytest
from loguru import logger

from a11y_audit.core.checker import A11yChecker
from a11y_audit.core.config import A11yConfig
from a11y_audit.core.findings import Finding, Severity, SourceLocation
from a11y_audit.core.reporter import FindingReporter, RecordingSink


def test_defaults_match_built_in_lists() -> None:
    config = A11yConfig(_env_file=None)
    assert config.nondescriptive_phrases == ["click here", "tap here", "more"]
    assert "photo" in config.image_nouns
    assert "png" in config.filename_tokens
    assert config.validate_config()


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("A11Y_MIN_INTERACTIVE_SIZE", "48")
    monkeypatch.setenv("A11Y_IMAGE_NOUNS", '["bild", "foto"]')
    config = A11yConfig(_env_file=None)
    assert config.min_interactive_size == 48
    assert config.image_nouns == ["bild", "foto"]


def test_control_padding_per_idiom(config) -> None:
    assert config.control_padding() == 8
    config.device_idiom = "tablet"
    assert config.control_padding() == 12


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_size": -1},
        {"float_comparison_tolerance": 0},
        {"device_idiom": "watch"},
        {"phone_control_padding": -2},
    ],
)
def test_validate_config_rejects_bad_values(overrides) -> None:
    with pytest.raises(ValueError):
        A11yConfig(_env_file=None, **overrides).validate_config()


def test_finding_describe_includes_reason_elements_and_location(make_element) -> None:
    element = make_element(label="Save")
    finding = Finding.failure("Broken.", [element], "Because").at(SourceLocation("/x/test_ui.py", 12))
    assert finding.describe() == 'Broken.\nBecause\nElement: "Save" (button)\nAt: test_ui.py:12'


def test_reporter_counts_and_logs(make_element) -> None:
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{level}|{message}")
    try:
        sink = RecordingSink()
        reporter = FindingReporter(sink)
        reporter.report(Finding.warning("Heads up."))
        reporter.report(Finding.failure("Broken."))
        reporter.finish()
    finally:
        logger.remove(handler_id)

    assert reporter.warning_count == 1
    assert reporter.failure_count == 1
    assert [finding.severity for finding in sink.findings] == [Severity.WARNING, Severity.FAILURE]
    assert sink.failed
    assert messages[0].startswith("WARNING|") and "Heads up." in messages[0]
    assert messages[1].startswith("ERROR|") and "Broken." in messages[1]


def test_recording_sink_without_failures_passes() -> None:
    sink = RecordingSink()
    sink.record(Finding.warning("Only a warning."))
    assert not sink.failed
    assert len(sink.warnings) == 1 and sink.failures == []


@pytest.mark.parametrize("field", ["phone_control_padding", "tablet_control_padding", "min_interactive_size"])
def test_negative_thresholds_rejected_at_construction(field) -> None:
    with pytest.raises(ValueError):
        A11yConfig(_env_file=None, **{field: -100})


def test_checker_validates_config_before_any_pass(config) -> None:
    config.phone_control_padding = -100
    with pytest.raises(ValueError, match="padding"):
        A11yChecker(config)
