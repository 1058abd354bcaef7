"""Name stitching for package-qualified data-set names."""

from __future__ import annotations


def stitch_names(
    first: str | None,
    second: str | None,
    separator: str = "_",
    max_length: int | None = None,
) -> str | None:
    """Join two name parts with a separator, bounded in length.

    If only one part is given it is returned alone, cut at the end to
    ``max_length``. If both are given and the joined name is too long, it
    is cut from the front instead: the trailing (innermost) part of a
    package path is the more distinguishing one.

    Args:
    ----
        first: Leading part (usually the package path), may be None.
        second: Trailing part (usually the type name), may be None.
        separator: Placed between both parts.
        max_length: Maximum result length, None for unbounded.

    Returns:
    -------
        The stitched name, or None if both parts are missing or
        ``max_length`` is 0.

    Examples:
    --------
        >>> stitch_names("Pkg", "MyStruct")
        'Pkg_MyStruct'
        >>> stitch_names(None, "MyStruct", max_length=4)
        'MySt'
        >>> stitch_names("Outer_Inner", "Leaf", max_length=8)
        'ner_Leaf'

    """
    if (first is None and second is None) or max_length == 0:
        return None
    if second is None:
        return first[:max_length] if max_length else first
    if first is None:
        return second[:max_length] if max_length else second

    joined = f"{first}{separator}{second}"
    if max_length is not None and len(joined) > max_length:
        return joined[-max_length:]
    return joined
