# Constants for the maximum number of colors and ranks
MAX_NUM_COLORS = 5
MAX_NUM_RANKS = 5

# Hint bitmasks carry one bit per hand position.
MAX_HAND_SIZE = 8


class HanabiRequirementError(RuntimeError):
    """Raised when a caller breaks the contract of an engine operation."""


def color_index_to_char(color: int) -> str:
    """Converts a color index into its corresponding character."""
    if 0 <= color < MAX_NUM_COLORS:
        return "RYGWB"[color]
    return "X"


def rank_index_to_char(rank: int) -> str:
    """Converts a rank index into its corresponding character."""
    if 0 <= rank < MAX_NUM_RANKS:
        return "12345"[rank]
    return "X"


def parameter_value(params: dict, key: str, default_value):
    """
    Fetches a value associated with a key in the params dictionary
    and converts it to the type of the default value if present.
    Returns the default value otherwise.
    """
    if key not in params:
        return default_value
    value = params[key]

    # bool before int, bool is a subclass of int
    if isinstance(default_value, bool):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in ["1", "true", "yes"]
    try:
        if isinstance(default_value, int):
            return int(value)
        elif isinstance(default_value, float):
            return float(value)
        elif isinstance(default_value, str):
            return str(value)
    except ValueError:
        raise HanabiRequirementError(
            f"Parameter {key}={value!r} is not a valid {type(default_value).__name__}"
        )

    return value


def require(expr: bool, message: str = "Input requirements failed!"):
    """
    Enforces a condition and raises HanabiRequirementError if it fails.
    Unlike a bare assert this is never stripped by python -O.
    """
    if not expr:
        raise HanabiRequirementError(message)
