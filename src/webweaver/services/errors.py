"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when a decoded save file cannot be loaded."""
