import pytest

from prepmind.services.wizard import ConfigWizard, WizardStep


def test_cannot_leave_domain_step_without_a_domain():
    wizard = ConfigWizard()

    assert wizard.can_proceed() is False
    assert wizard.next_step() is False
    assert wizard.step == WizardStep.DOMAIN


def test_topics_step_needs_at_least_one_topic():
    wizard = ConfigWizard()
    wizard.select_domain("python")
    wizard.next_step()
    wizard.next_step()

    assert wizard.step == WizardStep.TOPICS
    assert wizard.next_step() is False

    wizard.toggle_topic("Python Basics")
    assert wizard.next_step() is True
    assert wizard.step == WizardStep.FORMAT


def test_toggle_topic_adds_and_removes():
    wizard = ConfigWizard()
    wizard.select_domain("python")

    wizard.toggle_topic("Comprehensions")
    wizard.toggle_topic("Python Basics")
    wizard.toggle_topic("Comprehensions")

    assert wizard.topics == ["Python Basics"]


def test_topic_from_another_domain_is_rejected():
    wizard = ConfigWizard()
    wizard.select_domain("python")

    with pytest.raises(ValueError):
        wizard.toggle_topic("Linked Lists")


def test_changing_domain_clears_topics():
    wizard = ConfigWizard()
    wizard.select_domain("python")
    wizard.toggle_topic("Python Basics")

    wizard.select_domain("python")
    assert wizard.topics == ["Python Basics"]

    wizard.select_domain("dsa")
    assert wizard.topics == []


def test_unknown_choices_are_rejected():
    wizard = ConfigWizard()

    with pytest.raises(ValueError):
        wizard.select_domain("cooking")
    with pytest.raises(ValueError):
        wizard.select_difficulty("impossible")
    with pytest.raises(ValueError):
        wizard.select_format("essay")


def test_previous_step_stops_at_the_first_step():
    wizard = ConfigWizard()
    wizard.select_domain("dsa")
    wizard.next_step()

    assert wizard.previous_step() is True
    assert wizard.previous_step() is False
    assert wizard.step == WizardStep.DOMAIN


def test_build_produces_a_coding_config():
    wizard = ConfigWizard()
    wizard.select_domain("dsa")
    wizard.next_step()
    wizard.select_difficulty("advanced")
    wizard.next_step()
    wizard.toggle_topic("Dynamic Programming")
    wizard.next_step()
    wizard.select_format("coding")

    config = wizard.build()

    assert config.domain == "Data Structures & Algorithms"
    assert config.difficulty == "advanced"
    assert config.topics == ["Dynamic Programming"]
    assert config.format == "coding"
    assert config.interaction_mode is None
    assert config.duration == 30


def test_build_before_the_last_step_fails():
    wizard = ConfigWizard()
    wizard.select_domain("dsa")

    with pytest.raises(ValueError):
        wizard.build()
