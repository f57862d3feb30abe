"""Exceptions raised by chromalab."""


class ColorError(Exception):
    """Base class for all chromalab errors."""


class DomainError(ColorError, ValueError):
    """A channel value lies outside the domain of the requested formula."""


class IlluminantMismatchError(ColorError, ValueError):
    """Two illuminant-relative colors were combined without an adaptation target."""

    def __init__(self, first, second):
        self.first = first
        self.second = second
        super().__init__(
            f"Colors are relative to different illuminants ({first.name} and {second.name}); "
            f"pass illuminant= to adapt both before comparing or mixing"
        )


class GamutUnrepresentableError(ColorError, ValueError):
    """No point inside the target gamut was found by the clipping search."""
