"""Values, their uses, and users that hold operands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar

from .types import IRError, Type


@dataclass(frozen=True)
class Use:
    """One place where a value is used: operand ``arg_no`` of ``user``."""

    user: User
    arg_no: int


class Value:
    """Anything that has a type and may be used as an operand."""

    sigil: ClassVar[str] = "%"

    def __init__(self, type: Type, name: str = ""):
        self.type = type
        self.name = name
        self.use_list: list[Use] = []

    def set_name(self, name: str) -> bool:
        """Name the value unless it already has a name; report whether it did."""
        if self.name == "":
            self.name = name
            return True
        return False

    def add_use(self, user: User, arg_no: int) -> None:
        self.use_list.append(Use(user, arg_no))

    def remove_use(self, user: User, arg_no: int) -> None:
        target = Use(user, arg_no)
        self.use_list[:] = [use for use in self.use_list if use != target]

    def replace_all_use_with(self, new_val: Value | None) -> None:
        if self is new_val:
            return
        while self.use_list:
            use = self.use_list[0]
            use.user.set_operand(use.arg_no, new_val)

    def replace_use_with_if(
        self, new_val: Value | None, should_replace: Callable[[Use], bool]
    ) -> None:
        if self is new_val:
            return
        for use in list(self.use_list):
            if should_replace(use):
                use.user.set_operand(use.arg_no, new_val)

    def operand_text(self) -> str:
        """How the value is spelled when it appears as an operand."""
        return f"{self.sigil}{self.name}"

    def as_operand(self, with_type: bool) -> str:
        prefix = f"{self.type} " if with_type else ""
        return prefix + self.operand_text()


class User(Value):
    """A value that refers to other values through its operands."""

    def __init__(self, type: Type, name: str = ""):
        super().__init__(type, name)
        self.operands: list[Value | None] = []

    def set_operand(self, index: int, value: Value | None) -> None:
        if not 0 <= index < len(self.operands):
            raise IRError(f"set_operand index {index} out of range")
        old = self.operands[index]
        if old is not None:
            old.remove_use(self, index)
        if value is not None:
            value.add_use(self, index)
        self.operands[index] = value

    def add_operand(self, value: Value) -> None:
        if value is None:
            raise IRError("cannot add a missing operand")
        value.add_use(self, len(self.operands))
        self.operands.append(value)

    def remove_all_operands(self) -> None:
        for index, operand in enumerate(self.operands):
            if operand is not None:
                operand.remove_use(self, index)
        self.operands.clear()

    def remove_operand(self, index: int) -> None:
        if not 0 <= index < len(self.operands):
            raise IRError(f"remove_operand index {index} out of range")
        for i in range(index + 1, len(self.operands)):
            operand = self.operands[i]
            if operand is not None:
                operand.remove_use(self, i)
                operand.add_use(self, i - 1)
        removed = self.operands.pop(index)
        if removed is not None:
            removed.remove_use(self, index)


def print_as_op(value: Value, with_type: bool) -> str:
    """Spell ``value`` as an operand, optionally prefixed with its type."""
    return value.as_operand(with_type)