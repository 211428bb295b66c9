"""Immediate-mode UI callbacks drawn once per frame."""

from __future__ import annotations

from collections.abc import Callable

from blocky.modules import ModuleWrapper

UiComponent = Callable[[], None]


class GuiRenderingModule(ModuleWrapper):
    """Runs every registered UI callback between a frame's begin and end hooks."""

    def __init__(self, begin_frame: Callable[[], None] | None = None,
                 end_frame: Callable[[], None] | None = None) -> None:
        self._begin_frame = begin_frame
        self._end_frame = end_frame
        self._components: dict[str, UiComponent] = {}
        self.last_delta = 0.0

    def update(self, delta: float) -> None:
        """Record the frame time; drawing happens in :meth:`render`."""
        self.last_delta = delta

    def render(self) -> None:
        """Draw one frame of every UI component."""
        if self._begin_frame is not None:
            self._begin_frame()
        for component in list(self._components.values()):
            component()
        if self._end_frame is not None:
            self._end_frame()

    def add_component(self, tag: str, ui_component: UiComponent) -> None:
        """Register a UI callback, replacing any with the same tag."""
        self._components[tag] = ui_component

    def remove_component(self, tag: str) -> None:
        """Unregister the UI callback with this tag, if present."""
        self._components.pop(tag, None)

    @property
    def tags(self) -> list[str]:
        return list(self._components)