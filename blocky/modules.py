"""Engine modules and the registry that updates them each frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TypeVar


class ModuleWrapper(ABC):
    """Base class of every engine module."""

    @abstractmethod
    def update(self, delta: float) -> None:
        """Advance the module by ``delta`` seconds."""


class ModuleMissingError(LookupError):
    """Raised when a requested module is not registered."""


T = TypeVar("T", bound=ModuleWrapper)


class ModuleManager:
    """Holds one instance per module type and cascades updates to them."""

    _instance: "ModuleManager | None" = None

    def __init__(self, modules: Iterable[ModuleWrapper] = ()) -> None:
        self._modules: dict[type, ModuleWrapper] = {}
        for module in modules:
            self.register(module)

    @classmethod
    def create_instance(cls, modules: Iterable[ModuleWrapper] = ()) -> "ModuleManager":
        """Create the shared instance, replacing any earlier one."""
        cls._instance = cls(modules)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "ModuleManager":
        """Return the shared instance."""
        if cls._instance is None:
            raise RuntimeError("ModuleManager instance has not been created")
        return cls._instance

    def register(self, module: ModuleWrapper) -> None:
        """Add a module, replacing any module of the same type."""
        if not isinstance(module, ModuleWrapper):
            raise TypeError("module must inherit from ModuleWrapper")
        self._modules[type(module)] = module

    def get_module(self, module_type: type[T]) -> T:
        """Return the module registered under exactly this type."""
        if not (isinstance(module_type, type) and issubclass(module_type, ModuleWrapper)):
            raise TypeError("module type must inherit from ModuleWrapper")
        try:
            return self._modules[module_type]  # type: ignore[return-value]
        except KeyError:
            raise ModuleMissingError(
                "Requested module not found in the modules map") from None

    def update(self, delta: float) -> None:
        """Update every registered module."""
        for module in self._modules.values():
            module.update(delta)