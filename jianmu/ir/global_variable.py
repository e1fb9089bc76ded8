"""Global variables."""

from __future__ import annotations

from typing import ClassVar

from .constants import Constant
from .module import Module
from .types import IRError, PointerType, Type
from .values import User


class GlobalVariable(User):
    """A module-level variable; its type is a pointer to the stored type."""

    sigil: ClassVar[str] = "@"

    def __init__(
        self,
        name: str,
        module: Module,
        type: Type,
        is_const: bool = False,
        init: Constant | None = None,
    ):
        super().__init__(type, name)
        self.is_const = is_const
        self.init = init
        module.add_global_variable(self)
        if init is not None:
            self.add_operand(init)

    @staticmethod
    def create(
        name: str,
        module: Module,
        type: Type,
        is_const: bool = False,
        init: Constant | None = None,
    ) -> GlobalVariable:
        """Create a global holding a ``type`` and register it with ``module``."""
        return GlobalVariable(name, module, PointerType.get(type), is_const, init)

    def __str__(self) -> str:
        if self.init is None:
            raise IRError(f"global variable @{self.name} has no initializer")
        kind = "constant" if self.is_const else "global"
        return (
            f"{self.as_operand(False)} = {kind} "
            f"{self.type.pointer_element_type()} {self.init}"
        )