"""Match a user-supplied printer name against the installed printers."""

from pdfspool.exceptions import PrinterResolutionError


def resolve_printer(requested: str, available: list[str]) -> str | None:
    """Find the installed printer a requested name refers to.

    Tried in order, first match wins:
    1. Exact name
    2. Requested name with underscores replaced by spaces
    3. Any installed name whose spaces, replaced by underscores, equals the request

    Args:
        requested: Printer name as given on the command line
        available: Installed printer names

    Returns:
        The matching installed name, or None
    """
    if requested in available:
        return requested

    normalized = requested.replace("_", " ")
    if normalized in available:
        return normalized

    for name in available:
        if name.replace(" ", "_") == requested:
            return name

    return None


def require_printer(requested: str, available: list[str]) -> str:
    """Like resolve_printer, but raise PrinterResolutionError when nothing matches."""
    match = resolve_printer(requested, available)
    if match is None:
        raise PrinterResolutionError(requested, available)
    return match
