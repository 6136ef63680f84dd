# cli/model_formatters.py

# anything that renders domain objects for display
from models.assignment import Assignment
from models.student import Student

# === student formatters ===


def format_student_oneline(student: Student) -> str:
    return f"{student.full_name:<30} ({student.id})"


# === assignment formatters ===


def format_assignment_oneline(assignment: Assignment) -> str:
    return f"{assignment.name:<20} | {assignment.category:<15} | {assignment.total_points} pts"


# === grade formatters ===


def format_orphan_grade(orphan: tuple[str, str, int]) -> str:
    student_id, assignment_name, grade = orphan

    return f"{student_id:<10} | {assignment_name:<20} | {grade}"
