# cli/menus/grades_menu.py

"""
Enter Grade flow for the Gradebook CLI.

Grades are stored exactly as entered: the student ID and assignment name are not checked against the gradebook,
and the score is not checked against the assignment's total points. Use the orphan grade check in the reports
to find grades that point at nothing.
"""

import cli.colors as colors
import cli.menu_helpers as helpers
from models.gradebook import Gradebook


def enter_grade(gradebook: Gradebook) -> None:
    student_id = helpers.prompt_required_input("Enter student ID:", "Student ID")
    assignment_name = helpers.prompt_required_input(
        "Enter assignment name:", "Assignment name"
    )
    grade = helpers.prompt_int_input("Enter grade:")

    gradebook_response = gradebook.enter_grade(student_id, assignment_name, grade)

    print(colors.body(f"\n{gradebook_response.detail}"))
