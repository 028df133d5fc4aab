"""Interactive prompts for choosing a show and a subject.

Ctrl-C inside a prompt raises ``KeyboardInterrupt`` so the CLI can exit with
status 130.
"""

from __future__ import annotations

import inquirer
from inquirer import errors

from tv_show_emoji.domain.catalog import DEFAULT_CATALOG, Catalog
from tv_show_emoji.domain.text_matcher import completer
from tv_show_emoji.domain.validators import validate_custom_subject
from tv_show_emoji.exceptions import InvalidArgumentError

CUSTOM_CHOICE = "custom (enter your own)"
DEFAULT_SUBJECT = "overall"


def _ask(question):
    answers = inquirer.prompt([question], raise_keyboard_interrupt=True)
    if answers is None:
        raise KeyboardInterrupt
    return answers[question.name]


def _require_text(_answers, current: str) -> bool:
    if not current.strip():
        raise errors.ValidationError("", reason="TV show name cannot be empty")
    return True


def _require_custom_subject(_answers, current: str) -> bool:
    try:
        validate_custom_subject(current)
    except InvalidArgumentError as e:
        raise errors.ValidationError("", reason=str(e)) from e
    return True


def prompt_for_show(catalog: Catalog = DEFAULT_CATALOG) -> str:
    """Ask for a show name; Tab cycles through catalog matches.

    Names outside the catalog are accepted; listed names come back in
    catalog spelling.
    """
    answer = _ask(
        inquirer.Text(
            "show",
            message="Enter TV show name (Tab to autocomplete)",
            validate=_require_text,
            autocomplete=completer(catalog.shows),
        )
    )
    return catalog.find_show(answer) or answer.strip()


def prompt_for_subject(catalog: Catalog = DEFAULT_CATALOG) -> str:
    """Pick a subject from the list, or type a custom one."""
    selection = _ask(
        inquirer.List(
            "subject",
            message="Select subject",
            choices=[*catalog.subjects, CUSTOM_CHOICE],
            default=DEFAULT_SUBJECT,
            carousel=True,
        )
    )
    if selection != CUSTOM_CHOICE:
        return selection

    custom = _ask(
        inquirer.Text(
            "custom_subject",
            message="Enter custom subject",
            validate=_require_custom_subject,
        )
    )
    return validate_custom_subject(custom)


def prompt_for_continue() -> bool:
    return bool(
        _ask(
            inquirer.Confirm(
                "again",
                message="Would you like to analyze another aspect?",
                default=True,
            )
        )
    )
