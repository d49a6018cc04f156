# src/solresolve/utils/utils_types.py


from typing import Any, Literal, get_args, get_origin


def literal_to_set(literal_type: Any) -> set[Any]:
    """Extract values from a Literal type as a set.

    Example:
        LayoutPreset = Literal["default", "hardhat"]
        valid = literal_to_set(LayoutPreset)  # {"default", "hardhat"}

    Raises:
        TypeError: If the input is not a Literal type
    """
    origin = get_origin(literal_type)
    if origin is not Literal:
        msg = f"Expected Literal type, got {literal_type}"
        raise TypeError(msg)
    return set(get_args(literal_type))


def match_literal(literal_type: Any, value: str) -> str | None:
    """Case-insensitively match ``value`` against a Literal of strings.

    Returns the canonical spelling from the Literal, or None if nothing matches.
    """
    wanted = value.strip().lower()
    for candidate in sorted(literal_to_set(literal_type)):
        if isinstance(candidate, str) and candidate.lower() == wanted:
            return candidate
    return None
