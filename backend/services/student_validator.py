"""
Student Validator

Checks a Student entity against its field constraints and reports one
message per invalid field.

Rules are evaluated in a fixed order. When a field breaks more than one rule,
the message of the last rule evaluated wins, so each field's "required" rule
comes last and a blank value is reported as missing rather than malformed.
Format rules treat None as valid and leave that case to the required rule.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from email_validator import validate_email, EmailNotValidError

from models import Student

# ASCII whitespace only: space, tab, newline, carriage return, form feed, vertical tab
NAME_PATTERN = re.compile(r"[a-zA-Z\s]+", re.ASCII)


@dataclass(frozen=True)
class ValidationRule:
    """A single (field, predicate, message) constraint."""
    field: str
    check: Callable[[Optional[str]], bool]
    message: str


def is_not_blank(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def is_alpha_with_spaces(value: Optional[str]) -> bool:
    if value is None:
        return True
    return NAME_PATTERN.fullmatch(value) is not None


def is_valid_email(value: Optional[str]) -> bool:
    """Syntax-only check, no DNS lookup."""
    if value is None:
        return True
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


STUDENT_RULES = (
    ValidationRule("first_name", is_alpha_with_spaces,
                   "First name should contain only alphabets and white spaces"),
    ValidationRule("first_name", is_not_blank, "First name is required"),
    ValidationRule("last_name", is_alpha_with_spaces,
                   "Last name should contain only alphabets and white spaces"),
    ValidationRule("last_name", is_not_blank, "Last name is required"),
    ValidationRule("email", is_valid_email, "Email should be valid"),
    ValidationRule("email", is_not_blank, "Email is required"),
)


def validate(student: Student, rules=STUDENT_RULES) -> Dict[str, str]:
    """
    Validate a student entity.

    Args:
        student: Entity to check
        rules: Ordered rules to evaluate

    Returns:
        Mapping of entity field name to violation message, in rule order.
        An empty dict means the entity is valid.
    """
    errors: Dict[str, str] = {}
    for rule in rules:
        if not rule.check(getattr(student, rule.field)):
            errors[rule.field] = rule.message
    return errors
