"""Shared CLI prompt utilities.

Common input prompts and validation used across CLI flows.
"""

from typing import Optional

from core import MAX_PASSWORD_LENGTH


def prompt_for_password_length() -> Optional[int]:
    """Prompt user for a password length.

    Non-numeric input and values above MAX_PASSWORD_LENGTH re-prompt.
    Zero and negative values are returned as-is; the generator reports them.

    Returns:
        Length as integer, or None to cancel
    """
    while True:
        val = input("\nDesired password length (or 'q' to cancel): ").strip().lower()

        if val in ['q', 'exit']:
            return None

        try:
            length = int(val)
        except ValueError:
            print("Invalid input. Enter a number.")
            continue

        if length > MAX_PASSWORD_LENGTH:
            print(f"Please enter a number no greater than {MAX_PASSWORD_LENGTH}.")
            continue
        return length


def prompt_yes_no(question: str) -> bool:
    """Ask a y/n question; anything other than 'y' means no."""
    response = input(f"{question} (y/n): ").strip().lower()
    return response == 'y'


def prompt_for_password(prompt: str = "\nEnter a password to analyze: ") -> str:
    """Read a full line of input without stripping so spaces are preserved."""
    return input(prompt)
