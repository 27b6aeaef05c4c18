"""Unit tests for prompt templates and work-history formatting."""

from backend.app.schemas.resume import WorkHistoryEntry
from backend.app.workflows.prompts import (
    cover_letter_prompt,
    format_work_history,
    job_responsibilities_prompt,
    keypoints_prompt,
    objective_prompt,
)


def entries(*pairs):
    return [WorkHistoryEntry(name=name, position=position) for name, position in pairs]


class TestFormatWorkHistory:
    def test_empty_history_is_empty_string(self):
        assert format_work_history([]) == ""

    def test_single_entry(self):
        assert format_work_history(entries(("Acme", "Engineer"))) == "Acme as a Engineer."

    def test_entries_joined_in_order_by_single_space(self):
        text = format_work_history(entries(("Acme", "Engineer"), ("Globex", "Lead"), ("Acme", "CTO")))
        assert text == "Acme as a Engineer. Globex as a Lead. Acme as a CTO."
        assert not text.endswith(" ")

    def test_missing_fields_render_empty(self):
        assert format_work_history([WorkHistoryEntry(name="Acme")]) == "Acme as a ."

    def test_non_string_values_are_interpolated(self):
        entry = WorkHistoryEntry.model_validate({"name": "Acme", "position": 2})
        assert format_work_history([entry]) == "Acme as a 2."

    def test_extra_fields_are_ignored(self):
        entry = WorkHistoryEntry.model_validate({"name": "Acme", "position": "Dev", "years": 3})
        assert format_work_history([entry]) == "Acme as a Dev."


class TestResumePrompts:
    def test_objective_prompt_contains_inputs(self):
        prompt = objective_prompt("Jane Doe", "Engineer", "4", "Python, Go")
        assert "name: Jane Doe" in prompt
        assert "role: Engineer (4 years)" in prompt
        assert "technologies: Python, Go." in prompt
        assert "100 word introduction" in prompt
        assert "first person" in prompt

    def test_keypoints_prompt_forbids_closing_remark(self):
        prompt = keypoints_prompt("Jane Doe", "Engineer", "4", "Python")
        assert "soft skills seperated by numbers" in prompt
        assert 'Do not write "The end"' in prompt
        assert "Jane Doe" in prompt

    def test_job_responsibilities_prompt_uses_count_and_history(self):
        history = format_work_history(entries(("Acme", "Engineer"), ("Globex", "Lead")))
        prompt = job_responsibilities_prompt("Jane Doe", "Engineer", history, 2)
        assert "I worked at 2 companies. Acme as a Engineer. Globex as a Lead." in prompt
        assert "50 words for each company" in prompt

    def test_prompts_are_deterministic(self):
        args = ("Jane <Doe>", "Engineer & Lead", "10", "C++ \"modern\"")
        assert objective_prompt(*args) == objective_prompt(*args)
        assert keypoints_prompt(*args) == keypoints_prompt(*args)

    def test_values_are_not_escaped_or_truncated(self):
        technologies = "x" * 5000 + " <b>&amp;</b>"
        assert technologies in objective_prompt("A", "B", "1", technologies)

    def test_unset_values_interpolated_as_is(self):
        prompt = objective_prompt(None, "Engineer", None, "Python")
        assert "name: None" in prompt
        assert "(None years)" in prompt


class TestCoverLetterPrompt:
    def test_contains_every_input(self):
        prompt = cover_letter_prompt(
            "Jane Doe", "Acme Corp", "a rocket company", "Engineer",
            "Acme as a Engineer.", "Python", "R",
        )
        for value in ("Jane Doe", "Acme Corp", "a rocket company", "Engineer", "Acme as a Engineer.", "Python"):
            assert value in prompt
        assert "I want to cold email R from Jane Doe" in prompt
        assert "without subject, maximum 300 words" in prompt
        assert "my CV is attached" in prompt
