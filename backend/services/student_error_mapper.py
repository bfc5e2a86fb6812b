"""
Student Error Mapper

Renames entity field names to their API counterparts so clients see the
same names they send.
"""

from types import MappingProxyType
from typing import List, Mapping

from dtos import ApiError

STUDENT_FIELD_MAPPING: Mapping[str, str] = MappingProxyType({
    "first_name": "studentFirstName",
    "last_name": "studentLastName",
    "email": "studentEmail",
})


def to_external_field(field: str) -> str:
    """Unknown names pass through unchanged."""
    return STUDENT_FIELD_MAPPING.get(field, field)


def map_errors(errors: Mapping[str, str]) -> List[ApiError]:
    """
    Convert a field -> message mapping into ApiErrors with external field names.

    Order follows the mapping's iteration order.
    """
    return [
        ApiError(field=to_external_field(field), message=message)
        for field, message in errors.items()
    ]
