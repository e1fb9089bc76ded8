"""The module: owner of types, functions and global variables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from .types import ArrayType, FloatType, FunctionType, IntegerType, PointerType, Type, TypeID

if TYPE_CHECKING:
    from .global_variable import GlobalVariable


class Module:
    """A translation unit; it interns its derived types."""

    def __init__(self) -> None:
        self.void_type = Type(TypeID.VOID, self)
        self.label_type = Type(TypeID.LABEL, self)
        self.int1_type = IntegerType(1, self)
        self.int32_type = IntegerType(32, self)
        self.float_type = FloatType(self)
        self.functions: list[Any] = []
        self.global_variables: list[GlobalVariable] = []
        self._pointer_types: dict[Type, PointerType] = {}
        self._array_types: dict[tuple[Type, int], ArrayType] = {}
        self._function_types: dict[tuple[Type, tuple[Type, ...]], FunctionType] = {}

    @property
    def int32_ptr_type(self) -> PointerType:
        return self.pointer_type(self.int32_type)

    @property
    def float_ptr_type(self) -> PointerType:
        return self.pointer_type(self.float_type)

    def pointer_type(self, contained: Type) -> PointerType:
        found = self._pointer_types.get(contained)
        if found is None:
            found = self._pointer_types[contained] = PointerType(contained)
        return found

    def array_type(self, contained: Type, num_elements: int) -> ArrayType:
        key = (contained, num_elements)
        found = self._array_types.get(key)
        if found is None:
            found = self._array_types[key] = ArrayType(contained, num_elements)
        return found

    def function_type(self, return_type: Type, params: Iterable[Type]) -> FunctionType:
        key = (return_type, tuple(params))
        found = self._function_types.get(key)
        if found is None:
            found = self._function_types[key] = FunctionType(return_type, key[1])
        return found

    def add_function(self, function: Any) -> None:
        self.functions.append(function)

    def add_global_variable(self, variable: GlobalVariable) -> None:
        self.global_variables.append(variable)

    def set_print_name(self) -> None:
        for function in self.functions:
            function.set_instr_name()

    def __str__(self) -> str:
        self.set_print_name()
        lines = [str(variable) for variable in self.global_variables]
        lines.extend(str(function) for function in self.functions)
        return "".join(line + "\n" for line in lines)