from __future__ import annotations

import pytest

from a11y_audit.core.findings import Severity
from a11y_audit.elements import ElementType, Trait
from a11y_audit.rules import A11yTest, RuleEngine
from a11y_audit.rules.text import contains_words, is_uppercased


@pytest.fixture
def engine(config) -> RuleEngine:
    return RuleEngine(config)


def _messages(findings) -> list[str]:
    return [finding.message for finding in findings]


# ---------------------------------------------------------------------------
# Text heuristics
# ---------------------------------------------------------------------------


def test_contains_words_matches_whole_words_only() -> None:
    assert contains_words("Learn more", ["more"]) == ["more"]
    assert contains_words("Moreover", ["more"]) == []
    assert contains_words("CLICK HERE now", ["click here", "tap here"]) == ["click here"]


def test_contains_words_separator_tokens_are_substrings() -> None:
    assert contains_words("photo-icon.png", ["_", "-", "png", "jpg"]) == ["-", "png"]
    assert contains_words("my_photo", ["photo", "_"]) == ["photo", "_"]


def test_is_uppercased_requires_cased_letters() -> None:
    assert is_uppercased("SUBMIT")
    assert is_uppercased("OK 123!")
    assert not is_uppercased("Submit")
    assert not is_uppercased("123")
    assert not is_uppercased("")


# ---------------------------------------------------------------------------
# Size
# ---------------------------------------------------------------------------


def test_minimum_size_exact_minimum_passes(engine, make_element) -> None:
    element = make_element(frame=(0, 0, 14, 14))
    assert engine.minimum_size(element) == []


def test_minimum_size_within_tolerance_passes(engine, make_element) -> None:
    element = make_element(frame=(0, 0, 13.95, 13.95))
    assert engine.minimum_size(element) == []


def test_minimum_size_below_minimum_minus_tolerance_warns(engine, make_element) -> None:
    element = make_element(frame=(0, 0, 100, 14 - 1 - 0.1))
    findings = engine.minimum_size(element)
    assert _messages(findings) == ["Element may not be tall enough."]
    assert findings[0].severity is Severity.WARNING
    assert findings[0].elements == (element,)
    assert "Minimum height: 14" in findings[0].reason


def test_minimum_size_reports_height_and_width_separately(engine, make_element) -> None:
    findings = engine.minimum_size(make_element(frame=(0, 0, 5, 5)))
    assert _messages(findings) == ["Element may not be tall enough.", "Element may not be wide enough."]


def test_minimum_size_skips_ignored_elements(engine, make_element) -> None:
    assert engine.minimum_size(make_element(frame=(0, 0, 1, 1), accessible=False)) == []


def test_minimum_interactive_size_fails_small_controls(engine, make_element) -> None:
    findings = engine.minimum_interactive_size(make_element(frame=(0, 0, 44, 30)))
    assert _messages(findings) == ["Interactive element not tall enough."]
    assert findings[0].severity is Severity.FAILURE


def test_minimum_interactive_size_scope(config, make_element) -> None:
    small_cell = make_element(type=ElementType.CELL, traits=(), frame=(0, 0, 20, 20))
    small_text = make_element(type=ElementType.STATIC_TEXT, traits=(), frame=(0, 0, 20, 20))

    assert RuleEngine(config).minimum_interactive_size(small_cell) == []
    assert RuleEngine(config).minimum_interactive_size(small_text) == []

    config.interactive_size_all_controls = True
    assert len(RuleEngine(config).minimum_interactive_size(small_cell)) == 2
    assert RuleEngine(config).minimum_interactive_size(small_text) == []


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------


def test_label_presence_short_label_warns(engine, make_element) -> None:
    findings = engine.label_presence(make_element(label="Go"))
    assert _messages(findings) == ["Label may not be meaningful."]
    assert findings[0].severity is Severity.WARNING


def test_label_presence_placeholder_without_label_fails(engine, make_element) -> None:
    findings = engine.label_presence(
        make_element(label="", type=ElementType.TEXT_FIELD, traits=(), placeholder="Email")
    )
    assert _messages(findings) == ['No label for element with placeholder "Email".']
    assert findings[0].severity is Severity.FAILURE


def test_label_presence_flags_uppercased_label(engine, make_element) -> None:
    findings = engine.label_presence(make_element(label="CONTINUE"))
    assert _messages(findings) == ["Label is uppercased."]


def test_label_presence_skips_cells_and_ignored(engine, make_element) -> None:
    assert engine.label_presence(make_element(label="", type=ElementType.CELL)) == []
    assert engine.label_presence(make_element(label="", accessible=False)) == []


def test_label_length_warns_over_maximum(engine, make_element) -> None:
    findings = engine.label_length(make_element(label="A" * 41))
    assert _messages(findings) == ["Label may be too long."]
    assert engine.label_length(make_element(label="A" * 40)) == []


def test_label_length_skips_text_types(engine, make_element) -> None:
    for element_type in (ElementType.STATIC_TEXT, ElementType.TEXT_VIEW):
        assert engine.label_length(make_element(label="A" * 200, type=element_type)) == []


def test_button_label_scenario_word_and_punctuation(engine, make_element) -> None:
    findings = engine.button_label(make_element(label="Submit Button."))
    assert _messages(findings) == [
        "Button should not contain the word 'button' in the accessibility label.",
        "Button accessibility labels shouldn't contain punctuation.",
    ]
    assert all(finding.severity is Severity.FAILURE for finding in findings)


def test_button_label_clean_label_passes(engine, make_element) -> None:
    assert engine.button_label(make_element(label="Submit")) == []


def test_button_label_one_finding_per_nondescriptive_phrase(engine, make_element) -> None:
    findings = engine.button_label(make_element(label="Click here for more"))
    reasons = [finding.reason for finding in findings if finding.message == "Button label may not be descriptive."]
    assert reasons == ["Offending word: click here", "Offending word: more"]


def test_button_label_requires_capital_letter(engine, make_element) -> None:
    findings = engine.button_label(make_element(label="continue"))
    assert _messages(findings) == ["Buttons should begin with a capital letter."]


def test_button_label_ignores_non_controls(engine, make_element) -> None:
    element = make_element(label="click here.", type=ElementType.STATIC_TEXT, traits=())
    assert engine.button_label(element) == []


def test_button_label_uses_configured_phrases(config, make_element) -> None:
    config.nondescriptive_phrases = ["hier klicken"]
    findings = RuleEngine(config).button_label(make_element(label="Hier klicken"))
    assert [finding.reason for finding in findings] == ["Offending word: hier klicken"]


@pytest.mark.parametrize(
    "element_type,traits,label",
    [
        (ElementType.TEXT_FIELD, (), "Email field"),
        (ElementType.SECURE_TEXT_FIELD, (), "Password field"),
        (ElementType.LINK, (), "Terms link"),
        (ElementType.BUTTON, (Trait.LINK,), "Privacy link"),
        (ElementType.SLIDER, (), "Volume slider"),
        (ElementType.BUTTON, (Trait.ADJUSTABLE, Trait.BUTTON), "Adjustable brightness"),
    ],
)
def test_type_redundant_wording_fails(engine, make_element, element_type, traits, label) -> None:
    findings = engine.button_label(make_element(label=label, type=element_type, traits=traits))
    assert len(findings) == 1
    assert "should not include their type" in findings[0].message


def test_image_label_scenario(engine, make_element) -> None:
    image = make_element(label="photo-icon.png", type=ElementType.IMAGE, traits=(Trait.IMAGE,))
    findings = engine.image_label(image)
    assert _messages(findings) == [
        "Images should not contain image words in the accessibility label.",
        "Image file name is used as the accessibility label.",
    ]
    assert findings[0].reason == "Offending words: icon, photo"
    assert "png" in findings[1].reason
    assert all(finding.severity is Severity.FAILURE for finding in findings)


def test_image_label_descriptive_label_passes(engine, make_element) -> None:
    image = make_element(label="Sunset over the harbour", type=ElementType.IMAGE, traits=(Trait.IMAGE,))
    assert engine.image_label(image) == []


# ---------------------------------------------------------------------------
# Traits and state
# ---------------------------------------------------------------------------


def test_image_trait_required(engine, make_element) -> None:
    assert _messages(engine.image_trait(make_element(type=ElementType.IMAGE, traits=()))) == [
        "Image should have Image trait."
    ]
    assert engine.image_trait(make_element(type=ElementType.IMAGE, traits=(Trait.IMAGE,))) == []


def test_button_trait_accepts_button_or_link(engine, make_element) -> None:
    assert engine.button_trait(make_element(traits=(Trait.LINK,))) == []
    assert engine.button_trait(make_element(traits=(Trait.BUTTON,))) == []
    assert _messages(engine.button_trait(make_element(traits=()))) == [
        "Button should have Button or Link trait."
    ]


def test_conflicting_traits(engine, make_element) -> None:
    element = make_element(
        traits=(Trait.BUTTON, Trait.LINK, Trait.STATIC_TEXT, Trait.UPDATES_FREQUENTLY)
    )
    assert len(engine.conflicting_traits(element)) == 2
    assert engine.conflicting_traits(make_element(traits=())) == []


def test_disabled_controls_warn(engine, make_element) -> None:
    findings = engine.disabled(make_element(enabled=False))
    assert _messages(findings) == ["Element disabled."]
    assert findings[0].severity is Severity.WARNING
    assert engine.disabled(make_element(type=ElementType.STATIC_TEXT, enabled=False)) == []


def test_evaluate_runs_every_rule_without_short_circuit(engine, make_element) -> None:
    element = make_element(label="more.", traits=(), frame=(0, 0, 10, 10), enabled=False)
    findings = engine.evaluate(element)
    messages = _messages(findings)
    assert "Element may not be tall enough." in messages
    assert "Interactive element not wide enough." in messages
    assert "Button label may not be descriptive." in messages
    assert "Buttons should begin with a capital letter." in messages
    assert "Button should have Button or Link trait." in messages
    assert "Element disabled." in messages


def test_evaluate_respects_selected_tests(engine, make_element) -> None:
    element = make_element(label="more.", traits=(), frame=(0, 0, 10, 10))
    findings = engine.evaluate(element, [A11yTest.BUTTON_TRAIT])
    assert _messages(findings) == ["Button should have Button or Link trait."]
