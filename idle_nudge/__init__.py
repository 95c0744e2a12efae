"""Keep a desktop session from going idle by nudging the mouse."""

__version__ = "0.2.0"
