# cli/menus/reports_menu.py

"""
Report flows for the Gradebook CLI.

The `Gradebook` builds the report rows as plain text; this module only decides how they are styled on screen.
"""

import cli.colors as colors
import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
from models.gradebook import Gradebook


def generate_report(gradebook: Gradebook) -> None:
    print()
    helpers.display_report_table(gradebook.report_rows())


def generate_assignment_report(gradebook: Gradebook) -> None:
    helpers.display_records(
        gradebook.assignments,
        "Assignments",
        model_formatters.format_assignment_oneline,
    )

    assignment_name = helpers.prompt_required_input(
        "Enter assignment name:", "Assignment name"
    )

    rows, summary = gradebook.assignment_report_rows(assignment_name)

    print()
    helpers.display_report_table(rows)
    print(f"\n{colors.header(summary)}")


def check_orphan_grades(gradebook: Gradebook) -> None:
    """
    Lists grades whose student ID or assignment name matches nothing in the gradebook.

    Args:
        gradebook (Gradebook): The active `Gradebook`.

    Notes:
        - This is a read-only check; orphans are left in place and become visible once the missing record is added.
    """
    orphans = gradebook.find_orphan_grades()

    if not orphans:
        print(colors.body("\nNo orphan grades found."))
        return

    print(colors.warning(f"\nFound {len(orphans)} orphan grade(s):"))
    helpers.display_results(orphans, True, model_formatters.format_orphan_grade)
