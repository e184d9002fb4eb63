"""Field checks shared by the update models"""
from typing import Any

from pydantic import ValidationInfo


def reject_null(value: Any, info: ValidationInfo) -> Any:
    """NOT NULL columns may be left out of an update but never set to null"""
    if value is None:
        raise ValueError(f"{info.field_name} cannot be null")
    return value
