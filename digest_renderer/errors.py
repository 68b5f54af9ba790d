"""Exceptions raised by the digest renderer."""


class DigestRendererError(Exception):
    """Base class for all digest renderer errors."""


class DigestValidationError(DigestRendererError, ValueError):
    """Digest data does not have the expected top-level shape."""


class ThemeNotFoundError(DigestRendererError, ValueError):
    """Requested theme name is not a built-in theme."""

    def __init__(self, name: str):
        super().__init__(f"Unknown theme: {name}")
        self.name = name


class RendererConfigError(DigestRendererError):
    """A renderer binding points at something that cannot be instantiated."""
