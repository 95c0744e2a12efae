class PointerError(Exception):
    """The host refused to move the pointer."""
