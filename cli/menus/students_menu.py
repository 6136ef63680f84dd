# cli/menus/students_menu.py

"""
Add Student flow for the Gradebook CLI.

Collects a last name, first name, and student ID, re-prompting until each is non-empty.
ID format and uniqueness are checked by `Gradebook.add_student()`; a rejected student is reported and discarded.
"""

import cli.colors as colors
import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
from models.gradebook import Gradebook


def add_student(gradebook: Gradebook) -> None:
    """
    Prompts for a new student's details and adds the student to the gradebook.

    Args:
        gradebook (Gradebook): The active `Gradebook`.
    """
    last_name = helpers.prompt_required_input("Enter last name:", "Last name")
    first_name = helpers.prompt_required_input("Enter first name:", "First name")
    student_id = helpers.prompt_required_input(
        "Enter student ID (8 digits):", "Student ID"
    )

    gradebook_response = gradebook.add_student(last_name, first_name, student_id)

    if not gradebook_response.success:
        helpers.display_response_failure(gradebook_response)
        print(f"{first_name} {last_name} was not added.")
        return

    print(colors.body(f"\n{gradebook_response.detail}"))


def view_students(gradebook: Gradebook) -> None:
    helpers.display_records(
        gradebook.students.values(),
        "Available Students",
        model_formatters.format_student_oneline,
    )
