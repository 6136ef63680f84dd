# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Gradebook application.

This module provides utilities for:
- Displaying interactive menus, record lists, and report tables
- Prompting for and re-prompting until user input is usable
- Displaying standard system messages, warnings, and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.colors as colors
import core.formatters as formatters
from core.response import Response
from models.types import RecordType


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{colors.info(title)}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(choice)

            # adjusts for zero-index, retrieves action from tuple
            return options[index][1]

        except (ValueError, IndexError):
            print(colors.error("Invalid choice. Please try again."))


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_records(
    records: Iterable[RecordType],
    list_description: str,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    records = list(records)

    if not records:
        print(f"\nThere are no {list_description.lower()}.")
        return

    print(f"\n{formatters.format_banner_text(list_description)}")
    display_results(records, True, formatter)


def display_report_table(rows: list[list[str]]) -> None:
    """
    Prints report rows with the header row styled apart from the body rows.

    Args:
        rows (list[list[str]]): Report rows, header first, as returned by the `Gradebook` report row builders.
    """
    if not rows:
        return

    print(colors.header(formatters.format_report_row(rows[0])))

    for row in rows[1:]:
        print(colors.body(formatters.format_report_row(row)))


# === prompt user input methods ===


# Prompt Helpers
#
# `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
# - `prompt_required_input()` re-prompts until the response is non-empty.
# - `prompt_int_input()` re-prompts until the response parses as a whole number within bounds.


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_required_input(prompt: str, field_description: str) -> str:
    while True:
        response = prompt_user_input(prompt)

        if response:
            return response

        print(colors.error(f"{field_description} cannot be empty. Please try again."))


def prompt_int_input(prompt: str, minimum: int | None = None) -> int:
    while True:
        response = prompt_user_input(prompt)

        try:
            value = int(response)

        except ValueError:
            print(colors.error("Invalid input. Please enter a whole number."))
            continue

        if minimum is not None and value < minimum:
            print(colors.error(f"Invalid input. Please enter a number of at least {minimum}."))
            continue

        return value


# === system messages ===


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(colors.error(f"\n[ERROR: {error_label}] {response.detail}"))


def display_response_warnings(response: Response) -> None:
    for warning in response.warnings:
        print(colors.warning(f"[WARNING] {warning}"))
