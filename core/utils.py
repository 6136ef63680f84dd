# core/utils.py

"""
Repository for program-wide utilities.
"""

import re

STUDENT_ID_LENGTH = 8


def is_valid_student_id(student_id: str) -> bool:
    return re.fullmatch(rf"[0-9]{{{STUDENT_ID_LENGTH}}}", student_id) is not None
