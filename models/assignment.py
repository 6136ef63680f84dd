# models/assignment.py

"""
The Assignment model represents quizzes, tests, or any other graded component.
"""

from __future__ import annotations

from typing import Any

DEFAULT_ASSIGNMENT_NAME = "Test Quiz"
DEFAULT_CATEGORY = "uncategorized"


class Assignment:

    def __init__(
        self,
        name: str,
        total_points: int,
        category: str = DEFAULT_CATEGORY,
    ):
        self._name = name
        self._total_points = Assignment.validate_points_input(total_points)
        self._category = category.lower()

    @property
    def name(self) -> str:
        return self._name

    @property
    def total_points(self) -> int:
        return self._total_points

    @property
    def category(self) -> str:
        return self._category

    def __repr__(self) -> str:
        return f"Assignment({self._name}, {self._total_points}, {self._category})"

    def __str__(self) -> str:
        return f"ASSIGNMENT: {self._name} - ({self._category})"

    # === data validators ===

    @staticmethod
    def validate_points_input(points: Any) -> int:
        """
        Validates and normalizes input for an `Assignment` total_points value.

        Accepts any input, and then:
            - Casts to int (whole-number strings such as "10" are accepted).
            - Ensures it is non-negative.

        Args:
            points (Any): The input value to validate.

        Returns:
            The normalized points value (int).

        Raises:
            TypeError: If the input cannot be cast to int.
            ValueError: If the input is less than zero.
        """
        if isinstance(points, bool):
            raise TypeError("Invalid input. Total points must be a whole number.")

        if isinstance(points, float) and not points.is_integer():
            raise TypeError("Invalid input. Total points must be a whole number.")

        try:
            points = int(points)

        except (TypeError, ValueError, OverflowError):
            raise TypeError("Invalid input. Total points must be a whole number.")

        if points < 0:
            raise ValueError("Invalid input. Total points cannot be less than zero.")

        return points
