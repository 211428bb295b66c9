"""Layered drawing of shapes, sprites and text through a pluggable canvas."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from blocky.camera import Camera
from blocky.logger import BLogger, LogLevel
from blocky.timeutil import TimeUtil

_FUNC = "void RenderingModule::Render()"

Color = tuple[int, int, int, int]
Vec2 = tuple[float, float]

FPS_MARGIN = 10
LINE_SPACING = 5
WHITE: Color = (255, 255, 255, 255)


class RenderableType(Enum):
    """The kinds of things the rendering module can draw."""

    RECTANGLE = auto()
    ELLIPSE = auto()
    SPRITE = auto()
    ANIMATED = auto()
    TEXT = auto()


@dataclass(eq=False)
class Renderable:
    """Something drawn each frame, placed by its world transform."""

    tag: str
    kind: RenderableType
    layer: int = 0
    position: Vec2 = (0.0, 0.0)
    scale: Vec2 = (1.0, 1.0)
    rotation: float = 0.0
    color: Color = WHITE
    filled: bool = True
    active: bool = True
    text: str = ""
    sprite_tag: str = ""
    file_path: str = ""
    source_rect: tuple[int, int, int, int] | None = None


class Canvas(ABC):
    """Drawing backend used by :class:`RenderingModule`."""

    @abstractmethod
    def polygon(self, xs: Sequence[int], ys: Sequence[int], color: Color,
                filled: bool) -> None:
        """Draw a polygon through the given corner coordinates."""

    @abstractmethod
    def ellipse(self, cx: int, cy: int, rx: int, ry: int, color: Color,
                filled: bool) -> None:
        """Draw an axis-aligned ellipse."""

    @abstractmethod
    def load_texture(self, path: str) -> Any:
        """Load an image; return a texture, or None if it cannot be loaded."""

    @abstractmethod
    def texture(self, texture: Any, source_rect: tuple[int, int, int, int] | None,
                dest_rect: tuple[float, float, float, float], angle: float) -> None:
        """Draw part (or all) of a texture into a rectangle, rotated by ``angle`` degrees."""

    @abstractmethod
    def text(self, text: str, color: Color, x: int, y: int, angle: float) -> None:
        """Draw text with its top-left corner at ``(x, y)``."""

    @abstractmethod
    def text_size(self, text: str) -> tuple[int, int]:
        """Return the width and height ``text`` would take."""

    @abstractmethod
    def output_size(self) -> tuple[int, int]:
        """Return the width and height of the drawing surface."""


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def rectangle_points(position: Vec2, scale: Vec2,
                     rotation: float) -> list[tuple[int, int]]:
    """Return the four screen corners of a rectangle rotated about its centre."""
    rad = math.radians(rotation)
    cos_t, sin_t = math.cos(rad), math.sin(rad)
    x, y = position
    w, h = scale[0] / 2.0, scale[1] / 2.0
    cos_w, sin_w = w * cos_t, w * sin_t
    cos_h, sin_h = h * cos_t, h * sin_t
    offsets = (
        (-cos_w + sin_h, -sin_w - cos_h),
        (cos_w + sin_h, sin_w - cos_h),
        (cos_w - sin_h, sin_w + cos_h),
        (-cos_w - sin_h, -sin_w + cos_h),
    )
    return [(int(x + _round_half_away(dx)), int(y + _round_half_away(dy)))
            for dx, dy in offsets]


def ellipse_geometry(position: Vec2, scale: Vec2) -> tuple[int, int, int, int]:
    """Return centre and radii of the ellipse filling the given box."""
    return (int(position[0]), int(position[1]),
            int(scale[0] / 2.0), int(scale[1] / 2.0))


def texture_dest_rect(position: Vec2,
                      scale: Vec2) -> tuple[float, float, float, float]:
    """Return the ``(x, y, w, h)`` rectangle centred on ``position``."""
    return (position[0] - scale[0] / 2.0, position[1] - scale[1] / 2.0,
            scale[0], scale[1])


def fps_color(fps: int) -> Color:
    """Green at 60 fps or more, yellow at 30 or more, red below."""
    if fps >= 60:
        return (0, 255, 0, 255)
    if fps >= 30:
        return (255, 255, 0, 255)
    return (255, 0, 0, 255)


def speed_text(speed: float) -> str:
    """Return the game-speed label shown with the frame counter."""
    return f"Speed: {speed:.3f}x"


class RenderingModule:
    """Draws registered renderables layer by layer, lowest layer first."""

    def __init__(self, canvas: Canvas, time_util: TimeUtil | None = None,
                 camera: Camera | None = None,
                 logger: BLogger | None = None) -> None:
        self._canvas = canvas
        self._time_util = time_util
        self._camera = camera if camera is not None else Camera()
        self._logger = logger if logger is not None else BLogger(None, to_file=False)
        self._layers: dict[int, list[Renderable]] = {}
        self._texture_cache: dict[str, Any] = {}

    @property
    def camera(self) -> Camera:
        return self._camera

    def add_renderable(self, renderable: Renderable) -> None:
        """Register ``renderable`` on its layer."""
        self._layers.setdefault(renderable.layer, []).append(renderable)

    def remove_renderable(self, renderable: Renderable) -> None:
        """Unregister ``renderable``; its layer must exist."""
        layer = self._layers.get(renderable.layer)
        if layer is None:
            message = (f"Removal of renderable {{{renderable.tag}}} was requested on layer "
                       f"{renderable.layer}, but that layer was not found.")
            self._logger.log(LogLevel.ERROR, _FUNC, message)
            raise KeyError(message)
        for entry in layer:
            if entry is renderable:
                layer.remove(entry)
                return

    def render(self) -> None:
        """Draw every active renderable, then the frame counter if enabled."""
        handlers = {
            RenderableType.RECTANGLE: self._render_rectangle,
            RenderableType.ELLIPSE: self._render_ellipse,
            RenderableType.SPRITE: self._render_sprite,
            RenderableType.ANIMATED: self._render_sprite,
            RenderableType.TEXT: self._render_text,
        }
        for layer in sorted(self._layers):
            for renderable in list(self._layers[layer]):
                if renderable.active:
                    handlers[renderable.kind](renderable)

        timer = self._time_util if self._time_util is not None else TimeUtil.get_instance()
        if timer.fps_counter_enabled:
            self._render_game_info(timer)

    def _screen_position(self, position: Vec2) -> Vec2:
        cx, cy = self._camera.position
        return (position[0] - cx, position[1] - cy)

    def _render_rectangle(self, renderable: Renderable) -> None:
        points = rectangle_points(self._screen_position(renderable.position),
                                  renderable.scale, renderable.rotation)
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        self._canvas.polygon(xs, ys, tuple(int(c) for c in renderable.color),
                             renderable.filled)

    def _render_ellipse(self, renderable: Renderable) -> None:
        cx, cy, rx, ry = ellipse_geometry(self._screen_position(renderable.position),
                                          renderable.scale)
        self._canvas.ellipse(cx, cy, rx, ry, tuple(int(c) for c in renderable.color),
                             renderable.filled)

    def _load_texture(self, renderable: Renderable) -> Any:
        cached = self._texture_cache.get(renderable.sprite_tag)
        if cached is not None:
            return cached
        texture = self._canvas.load_texture(renderable.file_path)
        if texture is None:
            self._logger.log(LogLevel.ERROR, _FUNC,
                             f"Failed to load image: {renderable.file_path}")
            return None
        self._texture_cache[renderable.sprite_tag] = texture
        return texture

    def _render_sprite(self, renderable: Renderable) -> None:
        texture = self._load_texture(renderable)
        if texture is None:
            return
        source = renderable.source_rect if renderable.kind is RenderableType.ANIMATED else None
        dest = texture_dest_rect(self._screen_position(renderable.position),
                                 renderable.scale)
        self._canvas.texture(texture, source, dest, renderable.rotation)

    def _render_text(self, renderable: Renderable) -> None:
        x, y = self._screen_position(renderable.position)
        self._canvas.text(renderable.text, tuple(int(c) for c in renderable.color),
                          int(x), int(y), renderable.rotation)

    def _render_game_info(self, timer: TimeUtil) -> None:
        fps = timer.fps
        width, _ = self._canvas.output_size()

        fps_label = f"FPS: {fps}"
        text_width, text_height = self._canvas.text_size(fps_label)
        self._canvas.text(fps_label, fps_color(fps),
                          int(width - text_width - FPS_MARGIN), FPS_MARGIN, 0.0)

        speed_label = speed_text(timer.game_speed)
        text_width, text_height = self._canvas.text_size(speed_label)
        self._canvas.text(speed_label, WHITE, int(width - text_width - FPS_MARGIN),
                          FPS_MARGIN + text_height + LINE_SPACING, 0.0)