from typing import TypeVar

T = TypeVar("T")


def not_none(value: T | None, value_name: str | None = None) -> T:
    """Narrow an Optional that is known to be set, e.g. a row read back right after insert"""
    value_name_str = f" '{value_name}'" if value_name else ""
    if value is None:
        raise ValueError(f"Value{value_name_str} is None, which is unexpected")
    return value
