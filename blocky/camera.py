"""A 2-D camera whose position is clamped to a symmetric boundary."""

from __future__ import annotations


class Camera:
    """Camera offset applied to everything rendered in world space."""

    def __init__(self, position: tuple[float, float] = (0.0, 0.0),
                 boundary: tuple[float, float] = (100.0, 100.0)) -> None:
        self._x, self._y = (float(v) for v in position)
        self._bx, self._by = (float(v) for v in boundary)

    @staticmethod
    def _clamp(value: float, bound: float) -> float:
        return max(-bound, value) if value < 0 else min(bound, value)

    def _apply_bounds(self) -> None:
        self._x = self._clamp(self._x, self._bx)
        self._y = self._clamp(self._y, self._by)

    def translate(self, x: float, y: float) -> None:
        """Move by the given offset, staying within the boundary."""
        self._x += x
        self._y += y
        self._apply_bounds()

    def set_position(self, x: float, y: float) -> None:
        """Move to the given position, staying within the boundary."""
        self._x = float(x)
        self._y = float(y)
        self._apply_bounds()

    def set_boundary(self, x: float, y: float) -> None:
        """Change the boundary; the current position is not re-clamped."""
        self._bx = float(x)
        self._by = float(y)

    @property
    def position(self) -> tuple[float, float]:
        return (self._x, self._y)