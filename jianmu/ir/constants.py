"""Constant values."""

from __future__ import annotations

import struct
import weakref
from typing import Sequence

from .module import Module
from .types import ArrayType, Type
from .values import User


class Constant(User):
    """A value known at compile time; it prints itself as its operand text."""

    def operand_text(self) -> str:
        return str(self)


_int_cache: weakref.WeakKeyDictionary[Module, dict] = weakref.WeakKeyDictionary()
_float_cache: weakref.WeakKeyDictionary[Module, dict] = weakref.WeakKeyDictionary()
_zero_cache: weakref.WeakKeyDictionary[Type, ConstantZero] = weakref.WeakKeyDictionary()


def _to_single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class ConstantInt(Constant):
    def __init__(self, type: Type, value: int):
        super().__init__(type, "")
        self.value = value

    @staticmethod
    def get(value: int | bool, module: Module) -> ConstantInt:
        """The interned i32 constant, or the i1 constant when given a bool."""
        cache = _int_cache.setdefault(module, {})
        if isinstance(value, bool):
            key = (bool, value)
            ty, number = module.int1_type, int(value)
        else:
            key = (int, int(value))
            ty, number = module.int32_type, int(value)
        found = cache.get(key)
        if found is None:
            found = cache[key] = ConstantInt(ty, number)
        return found

    def __str__(self) -> str:
        if self.type.is_int1_type():
            return "false" if self.value == 0 else "true"
        return str(self.value)


class ConstantArray(Constant):
    def __init__(self, array_type: ArrayType, values: Sequence[Constant]):
        super().__init__(array_type, "")
        self.elements = list(values)
        for value in self.elements:
            self.add_operand(value)

    @staticmethod
    def get(array_type: ArrayType, values: Sequence[Constant]) -> ConstantArray:
        return ConstantArray(array_type, values)

    def element(self, index: int) -> Constant:
        return self.elements[index]

    def __len__(self) -> int:
        return len(self.elements)

    def __str__(self) -> str:
        parts = []
        for element in self.elements:
            prefix = "" if isinstance(element, ConstantArray) else str(element.type)
            parts.append(f"{prefix}{element}, ")
        return f"{self.type} [{''.join(parts)}]"


class ConstantFP(Constant):
    def __init__(self, type: Type, value: float):
        super().__init__(type, "")
        self.value = value

    @staticmethod
    def get(value: float, module: Module) -> ConstantFP:
        """The interned single-precision constant nearest to ``value``."""
        single = _to_single(value)
        cache = _float_cache.setdefault(module, {})
        found = cache.get(single)
        if found is None:
            found = cache[single] = ConstantFP(module.float_type, single)
        return found

    def __str__(self) -> str:
        bits = struct.unpack("<Q", struct.pack("<d", self.value))[0]
        return f"0x{bits:x}"


class ConstantZero(Constant):
    @staticmethod
    def get(type: Type, module: Module) -> ConstantZero:
        found = _zero_cache.get(type)
        if found is None:
            found = _zero_cache[type] = ConstantZero(type, "")
        return found

    def __str__(self) -> str:
        return "zeroinitializer"