"""
Shared CLI prompt helpers.

Thin adapters over input() so the migration logic can be driven by a
scripted input function in tests.
"""

from typing import Callable

from ec2_az_migration.errors import InputError

InputFunc = Callable[[str], str]


def confirm_action(message, skip_prompt=False, exact_match=None, input_func: InputFunc = input):
    """
    Prompt user to confirm an action.

    Args:
        message: Prompt message to display to the user
        skip_prompt: If True, skip confirmation and return True
        exact_match: If provided, user must type this exact string to confirm.
                    If None, accepts 'y' or 'yes' (case-insensitive)
        input_func: Callable used to read the answer

    Returns:
        bool: True if user confirmed or prompt was skipped, False otherwise
    """
    if skip_prompt:
        return True

    try:
        response = input_func(message).strip()
    except EOFError:
        print("\nConfirmation not received.")
        return False

    if exact_match is not None:
        return response == exact_match

    return response.lower() in {"y", "yes"}


def prompt_text(message: str, input_func: InputFunc = input) -> str:
    """
    Prompt until a non-empty answer is given.

    Raises:
        InputError: If input ends before an answer is given
    """
    while True:
        try:
            response = input_func(message).strip()
        except EOFError as exc:
            raise InputError(f"No answer received for prompt: {message.strip()}") from exc
        if response:
            return response
        print("A value is required; try again.")
