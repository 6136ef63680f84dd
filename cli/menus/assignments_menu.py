# cli/menus/assignments_menu.py

"""
Add Assignment flow for the Gradebook CLI.

Collects the assignment name, total points, and category, then lists the roster and lets the user assign
students one ID at a time. Each ID is checked for format and roster membership before it is accepted, since
`Gradebook.add_assignment()` trusts the list it is given.
"""

from typing import cast

import cli.colors as colors
import cli.menu_helpers as helpers
from cli.menu_helpers import MenuSignal
from cli.menus import students_menu
from models.gradebook import Gradebook


def add_assignment(gradebook: Gradebook) -> None:
    """
    Prompts for a new assignment's details and assigned students, then adds it to the gradebook.

    Args:
        gradebook (Gradebook): The active `Gradebook`.

    Notes:
        - A blank category is passed through so the `Gradebook` can apply its default and report a warning.
    """
    name = helpers.prompt_required_input("Enter assignment name:", "Assignment name")
    total_points = helpers.prompt_int_input("Enter total points:", minimum=0)
    category = helpers.prompt_user_input(
        "Enter assignment category (e.g., Finals, Tests, Quizzes, Midterms; leave blank for uncategorized):"
    )

    assigned_students = prompt_assigned_students(gradebook)

    gradebook_response = gradebook.add_assignment(
        name, total_points, assigned_students, category
    )

    helpers.display_response_warnings(gradebook_response)

    if not gradebook_response.success:
        helpers.display_response_failure(gradebook_response)
        print(f"{name} was not added.")
        return

    print(colors.body(f"\n{gradebook_response.detail}"))


def prompt_assigned_students(gradebook: Gradebook) -> list[str]:
    """
    Lists the roster and collects student IDs to assign until the user enters 0.

    Args:
        gradebook (Gradebook): The active `Gradebook`.

    Returns:
        The confirmed student IDs in the order they were entered.

    Notes:
        - Malformed IDs and IDs not on the roster are rejected with a message and the prompt repeats.
        - An ID entered twice is only assigned once.
    """
    students_menu.view_students(gradebook)

    assigned_students = []

    while True:
        student_id = helpers.prompt_user_input_or_cancel(
            "Select student to assign to (enter student ID, or 0 to finish):"
        )

        if student_id is MenuSignal.CANCEL or student_id == "0":
            break
        student_id = cast(str, student_id)

        try:
            gradebook.require_valid_student_id(student_id)

        except ValueError:
            print(colors.error("Invalid student ID format. Please enter 8 digits."))
            continue

        gradebook_response = gradebook.find_student_by_id(student_id)

        if not gradebook_response.success:
            print(colors.error("Student ID not found."))
            continue

        if student_id in assigned_students:
            print(colors.warning(f"Student ID {student_id} is already assigned."))
            continue

        assigned_students.append(student_id)
        print(colors.body(f"Student ID {student_id} confirmed and assigned."))

    return assigned_students
