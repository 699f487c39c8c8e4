from typing import Dict, List, Optional

import pytest
from rich.console import Console

from cozy_scripts.scaffold import CollectionError, MappingAnswerSource, collect_answers, default_fields
from cozy_scripts.scaffold import collector
from cozy_scripts.scaffold.prompts import PromptField


class RecordingSource:
    """Hands out queued answers and remembers every rejection message."""

    def __init__(self, answers: Dict[str, List[str]]) -> None:
        self.answers = {token: list(values) for token, values in answers.items()}
        self.rejections: List[tuple[str, str]] = []

    def ask(self, field: PromptField, error: Optional[str] = None) -> Optional[str]:
        if error:
            self.rejections.append((field.name, error))
        queue = self.answers.get(field.name)
        return queue.pop(0) if queue else None


def test_collects_answers_in_field_order(console: Console, valid_answers: Dict[str, str]) -> None:
    answers = collect_answers(default_fields("my-app"), MappingAnswerSource(valid_answers), console=console)

    assert answers == valid_answers
    assert list(answers) == list(valid_answers)


def test_defaults_fill_missing_optional_answers(console: Console) -> None:
    source = MappingAnswerSource({"<APP_SHORT_DESCRIPTION>": "Plants", "<USERNAME_GH>": "octocat"})

    answers = collect_answers(default_fields("plants"), source, console=console)

    assert answers["<SLUG_GH>"] == "plants"
    assert answers["<SLUG_NPM>"] == "plants"
    assert answers["<APP_CATEGORY>"] == ""
    assert answers["<USER_WEBSITE>"] == ""


def test_long_description_is_rejected_and_asked_again(console: Console) -> None:
    source = RecordingSource(
        {
            "<APP_SHORT_DESCRIPTION>": ["x" * 501, "Short enough"],
            "<USERNAME_GH>": ["octocat"],
        }
    )

    answers = collect_answers(default_fields("my-app"), source, console=console)

    assert answers["<APP_SHORT_DESCRIPTION>"] == "Short enough"
    assert source.rejections == [("<APP_SHORT_DESCRIPTION>", "Required. Must be less than 500 characters")]


def test_invalid_github_username_is_asked_again(console: Console) -> None:
    source = RecordingSource(
        {
            "<APP_SHORT_DESCRIPTION>": ["Plants"],
            "<USERNAME_GH>": ["octo_cat", "-octocat", "octocat"],
        }
    )

    answers = collect_answers(default_fields("my-app"), source, console=console)

    assert answers["<USERNAME_GH>"] == "octocat"
    assert source.rejections == [
        ("<USERNAME_GH>", "Must be valid github username"),
        ("<USERNAME_GH>", "Must be valid github username"),
    ]


def test_mapping_source_offers_successive_attempts(console: Console) -> None:
    source = MappingAnswerSource(
        {
            "<APP_SHORT_DESCRIPTION>": ["x" * 600, "Fine"],
            "<USERNAME_GH>": "octocat",
        }
    )

    answers = collect_answers(default_fields("my-app"), source, console=console)

    assert answers["<APP_SHORT_DESCRIPTION>"] == "Fine"


def test_exhausted_mapping_source_is_unrecoverable(console: Console) -> None:
    source = MappingAnswerSource({"<APP_SHORT_DESCRIPTION>": "x" * 501, "<USERNAME_GH>": "octocat"})

    with pytest.raises(CollectionError) as exc:
        collect_answers(default_fields("my-app"), source, console=console)

    assert "<APP_SHORT_DESCRIPTION>" in str(exc.value)


def test_missing_required_answer_is_unrecoverable(console: Console) -> None:
    with pytest.raises(CollectionError):
        collect_answers(default_fields("my-app"), MappingAnswerSource({}), console=console)


def test_end_of_input_becomes_collection_error(console: Console) -> None:
    class ClosedInput:
        def ask(self, field, error=None):
            raise EOFError()

    with pytest.raises(CollectionError):
        collect_answers(default_fields("my-app"), ClosedInput(), console=console)


def test_verbose_prints_received_answers(console: Console, valid_answers: Dict[str, str]) -> None:
    collect_answers(default_fields("my-app"), MappingAnswerSource(valid_answers), console=console, verbose=True)

    output = console.file.getvalue()
    assert "Informations received:" in output
    assert "<USERNAME_GH>: octocat" in output
    assert "<USER_WEBSITE>: https://octocat.example.org" in output


def test_quiet_collection_prints_nothing(console: Console, valid_answers: Dict[str, str]) -> None:
    collect_answers(default_fields("my-app"), MappingAnswerSource(valid_answers), console=console)

    assert console.file.getvalue() == ""


def test_interactive_source_shows_rejection_and_default(console: Console, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_ask(prompt, **kwargs):
        calls.append((prompt, kwargs))
        return "typed"

    monkeypatch.setattr(collector.Prompt, "ask", fake_ask)
    source = collector.InteractiveAnswerSource(console)
    field = default_fields("my-app")[0]

    assert source.ask(field, "Must be mainly lowercase") == "typed"

    prompt, kwargs = calls[0]
    assert "Github project name?" in prompt
    assert kwargs["default"] == "my-app"
    assert kwargs["console"] is console
    assert "Must be mainly lowercase" in console.file.getvalue()


def test_interactive_source_has_no_default_for_required_fields(console: Console, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(collector.Prompt, "ask", lambda prompt, **kwargs: calls.append(kwargs) or "")
    field = next(field for field in default_fields("my-app") if field.name == "<USERNAME_GH>")

    collector.InteractiveAnswerSource(console).ask(field)

    assert "default" not in calls[0]
