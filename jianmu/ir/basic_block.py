"""Basic blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .instruction import Instruction, OpID
from .types import IRError
from .values import Value

if TYPE_CHECKING:
    from .function import Function
    from .module import Module


_PREDS_GAP = " " * 48


class BasicBlock(Value):
    """A straight-line run of instructions ending in a terminator."""

    def __init__(self, module: Module, name: str = "", parent: Function | None = None):
        if parent is None:
            raise IRError("a basic block needs a parent function")
        super().__init__(module.label_type, name)
        self.parent = parent
        self.instructions: list[Instruction] = []
        self.pre_basic_blocks: list[BasicBlock] = []
        self.succ_basic_blocks: list[BasicBlock] = []
        parent.add_basic_block(self)

    @staticmethod
    def create(module: Module, name: str, parent: Function) -> BasicBlock:
        return BasicBlock(module, name, parent)

    def module(self) -> Module:
        return self.parent.parent

    def erase_from_parent(self) -> None:
        self.parent.remove(self)

    def is_terminated(self) -> bool:
        if not self.instructions:
            return False
        return self.instructions[-1].op_id in (OpID.RET, OpID.BR)

    def terminator(self) -> Instruction:
        if not self.is_terminated():
            raise IRError(f"block {self.name} is not terminated")
        return self.instructions[-1]

    def add_instruction(self, instruction: Instruction) -> None:
        if self.is_terminated():
            raise IRError(f"inserting an instruction into terminated block {self.name}")
        instruction.parent = self
        self.instructions.append(instruction)

    def remove_instruction(self, instruction: Instruction) -> None:
        try:
            self.instructions.remove(instruction)
        except ValueError:
            raise IRError("instruction is not in this block") from None
        instruction._detach()

    def add_pre_basic_block(self, block: BasicBlock) -> None:
        self.pre_basic_blocks.append(block)

    def add_succ_basic_block(self, block: BasicBlock) -> None:
        self.succ_basic_blocks.append(block)

    def remove_pre_basic_block(self, block: BasicBlock) -> None:
        self.pre_basic_blocks[:] = [b for b in self.pre_basic_blocks if b is not block]

    def remove_succ_basic_block(self, block: BasicBlock) -> None:
        self.succ_basic_blocks[:] = [b for b in self.succ_basic_blocks if b is not block]

    def __str__(self) -> str:
        text = f"{self.name}:"
        preds = self.pre_basic_blocks
        if preds:
            text += _PREDS_GAP + "; preds = "
            first = preds[0]
            for block in preds:
                if block is not first:
                    text += ", "
                text += block.as_operand(False)
        if self.parent is None:
            text += "\n; Error: Block without parent!"
        text += "\n"
        for instruction in self.instructions:
            text += f"  {instruction}\n"
        return text