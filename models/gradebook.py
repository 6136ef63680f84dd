# models/gradebook.py

"""
The Gradebook model is the central data object of the program and represents the "source of truth" for all data records.

Students are stored in a dictionary keyed by student ID, assignments in a list, and grades in a dictionary keyed by
the composite `(student_id, assignment_name)` tuple. All three preserve insertion order, which is also report order.

Grades are deliberately not linked to `Student` or `Assignment` objects: a grade may be entered for an unknown student
or assignment, and assignments sharing a name share a grade cell. `find_orphan_grades()` reports such entries without
changing them.

Provides the mutators `add_student()`, `add_assignment()`, and `enter_grade()`, and renders the class report and the
single-assignment report as plain comma-separated text.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

import core.formatters as formatters
from core.response import ErrorCode, Response
from models.assignment import DEFAULT_ASSIGNMENT_NAME, DEFAULT_CATEGORY, Assignment
from models.student import Student

logger = logging.getLogger(__name__)

GradeKey = tuple[str, str]

STUDENT_HEADER = ["Last_Name", "First_Name", "Student_Id"]


class Gradebook:

    def __init__(self):
        self._students: dict[str, Student] = {}
        self._assignments: list[Assignment] = []
        self._grades: dict[GradeKey, int] = {}

    # === properties ===

    # --- core data structures ---

    @property
    def students(self) -> Mapping[str, Student]:
        return MappingProxyType(self._students)

    @property
    def assignments(self) -> list[Assignment]:
        return list(self._assignments)

    @property
    def grades(self) -> dict[GradeKey, int]:
        return self._grades.copy()

    # === data accessors ===

    def grade_for(self, student_id: str, assignment_name: str) -> int | None:
        return self._grades.get((student_id, assignment_name))

    def find_student_by_id(self, student_id: str) -> Response:
        """
        Finds a `Student` by student ID.

        Args:
            student_id (str): The 8-digit ID of the target student.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was found.
                    - False if no student has the given ID.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the student is not found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student is not found
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matching `Student` object.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
        """
        student = self._students.get(student_id)

        if student is None:
            return Response.fail(
                detail=f"No student found with ID: {student_id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": student,
            },
        )

    def find_assignments_by_name(self, name: str) -> list[Assignment]:
        return [a for a in self._assignments if a.name == name]

    def find_orphan_grades(self) -> list[tuple[str, str, int]]:
        """
        Lists every grade cell whose student ID or assignment name matches no stored record.

        Returns:
            A list of `(student_id, assignment_name, grade)` tuples in the order the grades were first entered.

        Notes:
            - This method is read-only. Orphans are reported, never removed or repaired.
            - An orphan stops being an orphan as soon as the missing student or assignment is added.
        """
        assignment_names = {a.name for a in self._assignments}

        return [
            (student_id, assignment_name, grade)
            for (student_id, assignment_name), grade in self._grades.items()
            if student_id not in self._students
            or assignment_name not in assignment_names
        ]

    # === data manipulators ===

    # --- student manipulation ---

    def add_student(self, last_name: str, first_name: str, student_id: str) -> Response:
        """
        Creates a `Student` and appends it to the roster.

        Args:
            last_name (str): The student's last name.
            first_name (str): The student's first name.
            student_id (str): The student's 8-digit ID.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` was created and added.
                    - False if the ID is malformed or already in use.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if the ID is not exactly 8 digits.
                    - `ErrorCode.VALIDATION_FAILED` if the ID is not unique.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.
                    - On failure:
                        - None

        Notes:
            - This method mutates `Gradebook` state only on success.
        """
        try:
            self.require_valid_student_id(student_id)

        except ValueError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        try:
            self.require_unique_student_id(student_id)

            student = Student(student_id, first_name, last_name)

        except ValueError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.VALIDATION_FAILED,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._students[student.id] = student
            logger.debug("Added student %s", student.id)

            return Response.succeed(
                detail="Student successfully added to the gradebook.",
                data={
                    "record": student,
                },
            )

    # --- assignment manipulation ---

    def add_assignment(
        self,
        name: str,
        total_points: int,
        student_ids: list[str],
        category: str,
    ) -> Response:
        """
        Creates an `Assignment`, appends it to the gradebook, and opens a zero grade for each listed student.

        Args:
            name (str): The assignment name. Blank input is replaced with "Test Quiz".
            total_points (int): The points possible, a non-negative whole number.
            student_ids (list[str]): IDs of students to assign. The caller is responsible for validating these.
            category (str): The assignment category. Blank input is replaced with "uncategorized"; anything else is lowercased.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Assignment` was created, including when defaults were substituted.
                    - False if `total_points` is invalid.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if `total_points` is not a non-negative whole number.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Assignment): The added `Assignment` object.
                    - On failure:
                        - None
                - warnings (list[str]): One message per default substituted for blank input.

        Notes:
            - This method mutates `Gradebook` state only on success.
            - Student IDs are not checked against the roster. Each `(student_id, name)` grade cell is set to 0,
              overwriting any grade already stored under that key.
        """
        warnings = []

        if not name:
            name = DEFAULT_ASSIGNMENT_NAME
            warnings.append(
                f"No assignment name provided. Defaulting to '{DEFAULT_ASSIGNMENT_NAME}'."
            )

        if not category:
            category = DEFAULT_CATEGORY
            warnings.append(
                f"No category provided. Defaulting to '{DEFAULT_CATEGORY}'."
            )

        try:
            assignment = Assignment(name, total_points, category)

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            for warning in warnings:
                logger.info(warning)

            self._assignments.append(assignment)

            for student_id in student_ids:
                self._grades[(student_id, assignment.name)] = 0

            logger.debug(
                "Added assignment %r with %d assigned student(s)",
                assignment.name,
                len(student_ids),
            )

            return Response.succeed(
                detail="Assignment successfully added to the gradebook.",
                data={
                    "record": assignment,
                },
                warnings=warnings,
            )

    # --- grade manipulation ---

    def enter_grade(self, student_id: str, assignment_name: str, grade: int) -> Response:
        """
        Sets or overwrites the grade stored for a student on an assignment.

        Args:
            student_id (str): The student ID half of the grade key.
            assignment_name (str): The assignment name half of the grade key.
            grade (int): The points earned.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): Always True.
                - detail (str | None): A simple confirmation message.
                - status_code (int | None): Always 200.
                - data (dict | None): Payload with the following keys:
                    - "grade" (int): The stored grade.

        Notes:
            - No range check is made against the assignment's total points; negative and over-max grades are kept as-is.
            - Neither key is checked against the roster or assignment list, so this may create an orphan grade.
        """
        self._grades[(student_id, assignment_name)] = grade
        logger.debug("Entered grade %s for %s on %r", grade, student_id, assignment_name)

        return Response.succeed(
            detail="Grade successfully recorded.",
            data={
                "grade": grade,
            },
        )

    # === reports ===

    def report_rows(self) -> list[list[str]]:
        """
        Builds the class report as rows of text fields, header row first.

        Each student row holds the student's names and ID, one score per assignment in creation order, and an
        average. A missing grade shows as 0 and still adds the assignment's total points to the denominator.
        The average is truncated to two decimals, or "none" when there are no points possible at all.
        """
        rows = [STUDENT_HEADER + [a.name for a in self._assignments] + ["Average"]]

        for student in self._students.values():
            row = [student.last_name, student.first_name, student.id]
            total_earned = 0
            total_possible = 0

            for assignment in self._assignments:
                earned = self._grades.get((student.id, assignment.name), 0)
                row.append(str(earned))
                total_earned += earned
                total_possible += assignment.total_points

            if total_possible > 0:
                average = total_earned / total_possible * 100.0
                row.append(formatters.format_truncated_percentage(average))
            else:
                row.append("none")

            rows.append(row)

        return rows

    def report(self) -> str:
        return formatters.format_report_table(self.report_rows())

    def assignment_report_rows(self, assignment_name: str) -> tuple[list[list[str]], str]:
        """
        Builds the single-assignment report as rows of text fields plus a summary line.

        Args:
            assignment_name (str): The name to look grades up by.

        Returns:
            A `(rows, summary)` tuple. `rows` starts with the header; ungraded students show "none" and are left out
            of the average. `summary` is "Average score: <mean> / <total points>", where the total comes from the first
            assignment with a matching name and is omitted if there is none, or "Average score: none" if nobody has
            a grade.
        """
        rows = [STUDENT_HEADER + ["Score"]]
        total_score = 0
        num_graded = 0

        for student in self._students.values():
            score = self._grades.get((student.id, assignment_name))

            if score is None:
                rows.append([student.last_name, student.first_name, student.id, "none"])
                continue

            rows.append([student.last_name, student.first_name, student.id, str(score)])
            total_score += score
            num_graded += 1

        if num_graded == 0:
            return rows, "Average score: none"

        summary = f"Average score: {formatters.format_fixed_decimal(total_score / num_graded)}"

        matches = self.find_assignments_by_name(assignment_name)
        if matches:
            summary += f" / {matches[0].total_points}"

        return rows, summary

    def assignment_report(self, assignment_name: str) -> str:
        rows, summary = self.assignment_report_rows(assignment_name)

        return f"{formatters.format_report_table(rows)}\n\n{summary}"

    # === data validators ===

    def require_valid_student_id(self, student_id: str) -> None:
        """
        Validates that the given student ID is exactly 8 digits.

        Raises:
            ValueError: If the ID is malformed.
        """
        Student.validate_student_id_input(student_id)

    def require_unique_student_id(self, student_id: str) -> None:
        """
        Validates that no stored student already uses the given ID.

        Raises:
            ValueError: If a student with the same ID exists.
        """
        if student_id in self._students:
            raise ValueError("Student ID already exists. Please use a unique ID.")

    # === dunder methods ===

    def __repr__(self) -> str:
        return (
            f"Gradebook({len(self._students)} students, "
            f"{len(self._assignments)} assignments, {len(self._grades)} grades)"
        )
