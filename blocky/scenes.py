"""Scene templates and the manager that instantiates and updates them."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from typing import Any

from blocky.logger import BLogger, LogLevel

_FUNC = "void SceneManager::_switchScene()"

SceneCallback = Callable[["Scene", float, list], None]


class Scene:
    """A node in a scene tree; the root of a tree is what the manager stores."""

    def __init__(self, tag: str, active: bool = True,
                 children: Iterable["Scene"] = (),
                 on_update: SceneCallback | None = None) -> None:
        self.tag = tag
        self.active = active
        self.children: list[Scene] = list(children)
        self.on_update = on_update

    def add_child(self, child: "Scene") -> "Scene":
        """Attach ``child`` below this node and return it."""
        self.children.append(child)
        return child

    def clone(self) -> "Scene":
        """Return an independent copy of this node and everything below it."""
        return copy.deepcopy(self)

    def set_active(self, active: bool) -> None:
        self.active = active

    def update(self, delta: float, recalculation_list: list) -> None:
        """Run this node's update hook, then its children's, if active."""
        if not self.active:
            return
        if self.on_update is not None:
            self.on_update(self, delta, recalculation_list)
        for child in list(self.children):
            child.update(delta, recalculation_list)

    def __repr__(self) -> str:
        return f"Scene({self.tag!r}, active={self.active}, children={len(self.children)})"


class SceneManager:
    """Keeps scene templates and runs a fresh copy of the selected one."""

    _instance: "SceneManager | None" = None

    def __init__(self, logger: BLogger | None = None) -> None:
        self._logger = logger if logger is not None else BLogger(None, to_file=False)
        self._switch_target = ""
        self._scenes: list[Scene] = []
        self._active_scene: Scene | None = None
        self._recalculation_list: list[Any] = []

    @classmethod
    def create_instance(cls, logger: BLogger | None = None) -> "SceneManager":
        """Create the shared instance, replacing any earlier one."""
        cls._instance = cls(logger)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "SceneManager":
        """Return the shared instance."""
        if cls._instance is None:
            raise RuntimeError("SceneManager instance has not been created")
        return cls._instance

    def add_scene(self, scene: Scene) -> None:
        """Register a scene template."""
        self._scenes.append(scene)

    def remove_scene(self, target: str) -> None:
        """Remove the first scene with this tag; nothing happens if there is none."""
        for scene in self._scenes:
            if scene.tag == target:
                self._scenes.remove(scene)
                return

    def switch_scene(self, tag: str) -> None:
        """Select the scene to switch to at the start of the next update."""
        self._switch_target = tag

    @property
    def active_scene(self) -> Scene | None:
        return self._active_scene

    def _switch_scene(self) -> None:
        target = next((s for s in self._scenes if s.tag == self._switch_target), None)
        if target is not None:
            self._active_scene = target.clone()
            self._active_scene.set_active(True)
        else:
            self._logger.log(LogLevel.ERROR, _FUNC,
                             f"Scene {{{self._switch_target}}} could not be found")
        self._switch_target = ""

    def update(self, delta: float) -> None:
        """Switch if requested, update the active scene, then recalculate transforms."""
        if self._switch_target:
            self._switch_scene()

        if self._active_scene is not None:
            self._active_scene.update(delta, self._recalculation_list)

        for transform in self._recalculation_list:
            if transform.marked_for_recalculation:
                transform.recalculate_world_matrix()
        self._recalculation_list.clear()