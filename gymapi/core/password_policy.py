"""
Password policy validation.

Requirements:
- 6 to 128 characters
- At least 1 lowercase letter
- At least 1 uppercase letter
- At least 1 digit
"""

import re
from typing import List, Tuple

MIN_LENGTH = 6
MAX_LENGTH = 128


def validate_password(password: str) -> Tuple[bool, List[str]]:
    """
    Validate password against the policy.

    Args:
        password: The password to validate

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    errors = []

    if not password:
        return False, ["Password is required"]

    if len(password) < MIN_LENGTH:
        errors.append(f"Password must be at least {MIN_LENGTH} characters long")

    if len(password) > MAX_LENGTH:
        errors.append(f"Password must not exceed {MAX_LENGTH} characters")

    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")

    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")

    if not re.search(r"\d", password):
        errors.append("Password must contain at least one number")

    return len(errors) == 0, errors
