# cli/main.py

"""
Main Menu for the Gradebook CLI.

Parses command-line options, configures logging and color, and runs the menu loop over a single in-memory
Gradebook. Nothing is saved: all records are discarded when the program exits.
"""

import argparse
import logging
import os
from textwrap import dedent

import cli.colors as colors
import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import assignments_menu, grades_menu, reports_menu, students_menu
from models.gradebook import Gradebook

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gradebook",
        description="Record students, assignments, and grades, and print tabular reports.",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored terminal output"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser.parse_args(argv)


def configure(args: argparse.Namespace) -> None:
    """
    Applies command-line options to the logging and color settings.

    Args:
        args (argparse.Namespace): The parsed command-line options.

    Notes:
        - Colors are disabled by `--no-color` or by a non-empty `NO_COLOR` environment variable.
    """
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    colors.set_color_enabled(not (args.no_color or os.environ.get("NO_COLOR")))


def main(argv: list[str] | None = None) -> None:
    configure(parse_args(argv))

    display_welcome_message()

    run_cli(Gradebook())


def run_cli(gradebook: Gradebook) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Args:
        gradebook (Gradebook): The active `Gradebook`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("GRADEBOOK MENU")
    options = [
        ("Add Student", students_menu.add_student),
        ("Add Assignment", assignments_menu.add_assignment),
        ("Enter Grade", grades_menu.enter_grade),
        ("Generate Report", reports_menu.generate_report),
        ("Generate Assignment Report", reports_menu.generate_assignment_report),
        ("Check for Orphan Grades", reports_menu.check_orphan_grades),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            menu_response(gradebook)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def display_welcome_message() -> None:
    print(colors.info(formatters.format_banner_text("GRADEBOOK MANAGER")))
    print(
        colors.info(
            dedent(
                """\
                Welcome to the Gradebook Management System!
                This program allows you to manage student records and assignments.
                You can:
                ... Add a new student with a unique 8-digit ID.
                ... Add assignments with categories like Finals, Tests, Quizzes, and Midterms.
                ... Enter grades for students for specific assignments.
                ... Generate a report of all students' grades and averages.
                ... Generate a report for a specific assignment.
                Records are kept in memory only and are discarded on exit."""
            )
        )
    )

    helpers.prompt_user_input(colors.info("Press Enter to continue..."))


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit
