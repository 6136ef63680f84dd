# models/student.py

"""
Represents a student enrolled in the course.

Stores identifying information: last name, first name, and an 8-digit student ID.
Students are created through `Gradebook.add_student()` and are never edited afterwards,
so every field is exposed as a read-only property.
"""

from __future__ import annotations

from core.utils import STUDENT_ID_LENGTH, is_valid_student_id


class Student:

    def __init__(
        self,
        id: str,
        first_name: str,
        last_name: str,
    ):
        self._id: str = Student.validate_student_id_input(id)
        self._first_name: str = first_name
        self._last_name: str = last_name

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._first_name}, {self._last_name})"

    def __str__(self) -> str:
        return f"STUDENT: {self.full_name} - (ID: {self._id})"

    # === data validators ===

    @staticmethod
    def validate_student_id_input(student_id: str) -> str:
        """
        Validates a Student ID.

        The ID must be exactly eight ASCII decimal digits. No normalization is applied, so
        surrounding whitespace makes the ID invalid.

        Args:
            student_id: The input ID string to validate.

        Returns:
            The ID unchanged if valid.

        Raises:
            ValueError: If the ID does not conform to the expected format.
        """
        if not isinstance(student_id, str) or not is_valid_student_id(student_id):
            raise ValueError(
                f"Invalid student ID. ID must be {STUDENT_ID_LENGTH} digits."
            )
        return student_id
