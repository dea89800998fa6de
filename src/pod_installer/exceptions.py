"""Pod installation exceptions.

Messages are written for the person running the install: say what went wrong
and which pod or path it concerns.
"""


class PodError(Exception):
    """Base exception for pod installation operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (pod name, paths, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class PodInstallError(PodError):
    """Pod installation failed."""


class InstallOrderError(PodInstallError):
    """An install step was requested after a step that invalidates it."""
