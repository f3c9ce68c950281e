"""
Boolean coercion for inconsistently typed API flags.

The backend reports the same flag as a JSON boolean on one endpoint,
as 0/1 on another and as a string such as ``"enabled"`` on a third.
``coerce_bool`` is the single place where that is resolved.
"""

# Shapes a boolean-like field can take on the wire
BoolLike = bool | int | float | str | None

TRUTHY_TOKENS: frozenset[str] = frozenset({"1", "true", "yes", "on", "enabled"})


def coerce_bool(value: BoolLike, default: bool) -> bool:
    """
    Resolve a boolean-like value.

    Rules:
        - None: ``default``.
        - bool: returned unchanged.
        - int/float: True iff the truncated value equals 1.
        - str: True iff the trimmed, lower-cased text is one of
          ``TRUTHY_TOKENS``. Any other string is False, never ``default``.
        - anything else: ``default``.

    Args:
        value: Raw field value.
        default: Result for absent or unsupported values.

    Returns:
        The resolved flag.
    """
    if value is None:
        return default
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        try:
            return int(value) == 1
        except (OverflowError, ValueError):
            # inf / nan
            return False
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_TOKENS
    return default
