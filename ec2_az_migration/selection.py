"""
Numbered menu selection.

parse_selection is pure; prompt_for_selection is the console adapter that
prints the menu and asks again until the answer is valid.
"""

from __future__ import annotations

from typing import Sequence

from ec2_az_migration.common.cli_utils import InputFunc
from ec2_az_migration.errors import InvalidSelectionError


def format_menu(labels: Sequence[str]) -> list[str]:
    """Render menu lines numbered from 1."""
    return [f"{index}) {label}" for index, label in enumerate(labels, start=1)]


def parse_selection(raw_value: str, choice_count: int) -> int:
    """
    Convert a 1-based menu answer into a 0-based index.

    Raises:
        InvalidSelectionError: If the answer is not a number between 1 and choice_count
    """
    try:
        number = int(raw_value.strip())
    except ValueError as exc:
        raise InvalidSelectionError(raw_value, choice_count) from exc
    if not 1 <= number <= choice_count:
        raise InvalidSelectionError(raw_value, choice_count)
    return number - 1


def prompt_for_selection(
    title: str,
    labels: Sequence[str],
    prompt: str = "Choose a number: ",
    input_func: InputFunc = input,
) -> int:
    """
    Show a numbered menu and return the 0-based index the operator picked.

    Raises:
        InvalidSelectionError: If input ends before a valid answer is given
    """
    print()
    print(title)
    for line in format_menu(labels):
        print(line)

    while True:
        try:
            raw_value = input_func(prompt)
        except EOFError as exc:
            raise InvalidSelectionError("", len(labels)) from exc
        try:
            return parse_selection(raw_value, len(labels))
        except InvalidSelectionError as e:
            print(f"{e} Try again.")
