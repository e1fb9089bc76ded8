"""Types of the intermediate representation."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .module import Module


class IRError(Exception):
    """Raised when the IR is built or used in a way it does not allow."""


class TypeID(enum.Enum):
    VOID = enum.auto()
    LABEL = enum.auto()
    INTEGER = enum.auto()
    FUNCTION = enum.auto()
    ARRAY = enum.auto()
    POINTER = enum.auto()
    FLOAT = enum.auto()


class Type:
    """A type owned by a module; types are interned, so compare them with ``is``."""

    def __init__(self, tid: TypeID, module: Module | None):
        self.tid = tid
        self.module = module

    def is_void_type(self) -> bool:
        return self.tid is TypeID.VOID

    def is_label_type(self) -> bool:
        return self.tid is TypeID.LABEL

    def is_integer_type(self) -> bool:
        return self.tid is TypeID.INTEGER

    def is_function_type(self) -> bool:
        return self.tid is TypeID.FUNCTION

    def is_array_type(self) -> bool:
        return self.tid is TypeID.ARRAY

    def is_pointer_type(self) -> bool:
        return self.tid is TypeID.POINTER

    def is_float_type(self) -> bool:
        return self.tid is TypeID.FLOAT

    def is_int1_type(self) -> bool:
        return isinstance(self, IntegerType) and self.num_bits == 1

    def is_int32_type(self) -> bool:
        return isinstance(self, IntegerType) and self.num_bits == 32

    def pointer_element_type(self) -> Type:
        if isinstance(self, PointerType):
            return self.element_type
        raise IRError(f"pointer_element_type() called on non-pointer type {self}")

    def array_element_type(self) -> Type:
        if isinstance(self, ArrayType):
            return self.element_type
        raise IRError(f"array_element_type() called on non-array type {self}")

    def size(self) -> int:
        """Size in bytes of a value of this type."""
        raise IRError(f"type {self} has no size")

    def __str__(self) -> str:
        if self.tid is TypeID.VOID:
            return "void"
        if self.tid is TypeID.LABEL:
            return "label"
        return ""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class IntegerType(Type):
    def __init__(self, num_bits: int, module: Module | None):
        super().__init__(TypeID.INTEGER, module)
        self.num_bits = num_bits

    def size(self) -> int:
        if self.num_bits == 1:
            return 1
        if self.num_bits == 32:
            return 4
        raise IRError(f"unexpected integer width {self.num_bits}")

    def __str__(self) -> str:
        return f"i{self.num_bits}"


def _owning_module(ty: Type) -> Module:
    if ty.module is None:
        raise IRError(f"type {ty} does not belong to a module")
    return ty.module


class FunctionType(Type):
    def __init__(self, result: Type, params: Iterable[Type]):
        super().__init__(TypeID.FUNCTION, None)
        if not self.is_valid_return_type(result):
            raise IRError(f"invalid return type for function: {result}")
        params = tuple(params)
        for param in params:
            if not self.is_valid_argument_type(param):
                raise IRError(f"not a valid type for function argument: {param}")
        self.return_type = result
        self.params = params

    @staticmethod
    def get(result: Type, params: Iterable[Type]) -> FunctionType:
        return _owning_module(result).function_type(result, params)

    @staticmethod
    def is_valid_return_type(ty: Type) -> bool:
        return ty.is_integer_type() or ty.is_void_type() or ty.is_float_type()

    @staticmethod
    def is_valid_argument_type(ty: Type) -> bool:
        return ty.is_integer_type() or ty.is_pointer_type() or ty.is_float_type()

    def num_of_args(self) -> int:
        return len(self.params)

    def param_type(self, index: int) -> Type:
        return self.params[index]

    def __str__(self) -> str:
        args = ", ".join(str(p) for p in self.params)
        return f"{self.return_type} ({args})"


class ArrayType(Type):
    def __init__(self, contained: Type, num_elements: int):
        if not self.is_valid_element_type(contained):
            raise IRError(f"not a valid type for array element: {contained}")
        super().__init__(TypeID.ARRAY, contained.module)
        self.element_type = contained
        self.num_elements = num_elements

    @staticmethod
    def get(contained: Type, num_elements: int) -> ArrayType:
        if not ArrayType.is_valid_element_type(contained):
            raise IRError(f"not a valid type for array element: {contained}")
        return _owning_module(contained).array_type(contained, num_elements)

    @staticmethod
    def is_valid_element_type(ty: Type) -> bool:
        return ty.is_integer_type() or ty.is_array_type() or ty.is_float_type()

    def size(self) -> int:
        return self.element_type.size() * self.num_elements

    def __str__(self) -> str:
        return f"[{self.num_elements} x {self.element_type}]"


_POINTEE_TYPES = frozenset({TypeID.INTEGER, TypeID.FLOAT, TypeID.ARRAY, TypeID.POINTER})


class PointerType(Type):
    def __init__(self, contained: Type):
        if contained.tid not in _POINTEE_TYPES:
            raise IRError(f"not allowed type for pointer: {contained}")
        super().__init__(TypeID.POINTER, contained.module)
        self.element_type = contained

    @staticmethod
    def get(contained: Type) -> PointerType:
        if contained.tid not in _POINTEE_TYPES:
            raise IRError(f"not allowed type for pointer: {contained}")
        return _owning_module(contained).pointer_type(contained)

    def size(self) -> int:
        return 8

    def __str__(self) -> str:
        return f"{self.element_type}*"


class FloatType(Type):
    def __init__(self, module: Module | None):
        super().__init__(TypeID.FLOAT, module)

    @staticmethod
    def get(module: Module) -> FloatType:
        return module.float_type

    def size(self) -> int:
        return 4

    def __str__(self) -> str:
        return "float"