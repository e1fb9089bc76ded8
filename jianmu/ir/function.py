"""Functions and their formal arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from .types import FunctionType, IRError, Type
from .values import Value

if TYPE_CHECKING:
    from .basic_block import BasicBlock
    from .module import Module


class Argument(Value):
    """A formal parameter of a function."""

    def __init__(self, type: Type, name: str = "", parent: Function | None = None, arg_no: int = 0):
        super().__init__(type, name)
        self.parent = parent
        self.arg_no = arg_no

    def __str__(self) -> str:
        return f"{self.type} %{self.name}"


class Function(Value):
    """A function; without basic blocks it is a declaration."""

    sigil: ClassVar[str] = "@"

    def __init__(self, function_type: FunctionType, name: str, parent: Module):
        super().__init__(function_type, name)
        self.parent = parent
        self.basic_blocks: list[BasicBlock] = []
        self._seq_cnt = 0
        parent.add_function(self)
        self.args = [
            Argument(param, "", self, index)
            for index, param in enumerate(function_type.params)
        ]

    @staticmethod
    def create(function_type: FunctionType, name: str, parent: Module) -> Function:
        return Function(function_type, name, parent)

    @property
    def function_type(self) -> FunctionType:
        return self.type  # type: ignore[return-value]

    def return_type(self) -> Type:
        return self.function_type.return_type

    def num_of_args(self) -> int:
        return self.function_type.num_of_args()

    def is_declaration(self) -> bool:
        return not self.basic_blocks

    def entry_block(self) -> BasicBlock:
        if not self.basic_blocks:
            raise IRError(f"function @{self.name} has no basic blocks")
        return self.basic_blocks[0]

    def add_basic_block(self, block: BasicBlock) -> None:
        self.basic_blocks.append(block)

    def remove(self, block: BasicBlock) -> None:
        self.basic_blocks[:] = [b for b in self.basic_blocks if b is not block]
        for pre in block.pre_basic_blocks:
            pre.remove_succ_basic_block(block)
        for succ in block.succ_basic_blocks:
            succ.remove_pre_basic_block(block)

    def set_instr_name(self) -> None:
        """Give unnamed arguments, blocks and results sequential names."""
        seq: dict[int, int] = {}

        def name_it(value: Value, prefix: str) -> None:
            if id(value) in seq:
                return
            number = len(seq) + self._seq_cnt
            if value.set_name(f"{prefix}{number}"):
                seq[id(value)] = number

        for arg in self.args:
            name_it(arg, "arg")
        for block in self.basic_blocks:
            name_it(block, "label")
            for instruction in block.instructions:
                if not instruction.is_void():
                    name_it(instruction, "op")
        self._seq_cnt += len(seq)

    def __str__(self) -> str:
        self.set_instr_name()
        declaration = self.is_declaration()
        head = "declare " if declaration else "define "
        head += f"{self.return_type()} {self.as_operand(False)}("
        if declaration:
            head += ", ".join(str(p) for p in self.function_type.params)
        else:
            head += ", ".join(str(arg) for arg in self.args)
        head += ")"
        if declaration:
            return head + "\n"
        body = "".join(str(block) for block in self.basic_blocks)
        return f"{head} {{\n{body}}}"