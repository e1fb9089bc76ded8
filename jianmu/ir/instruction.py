"""The instruction base class and opcode table."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from .types import IRError, Type
from .values import User

if TYPE_CHECKING:
    from .basic_block import BasicBlock
    from .function import Function
    from .module import Module


class OpID(enum.Enum):
    """Instruction opcodes; each value is the mnemonic printed in the IR."""

    RET = "ret"
    BR = "br"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    SDIV = "sdiv"
    FADD = "fadd"
    FSUB = "fsub"
    FMUL = "fmul"
    FDIV = "fdiv"
    ALLOCA = "alloca"
    LOAD = "load"
    STORE = "store"
    GE = "sge"
    GT = "sgt"
    LE = "sle"
    LT = "slt"
    EQ = "eq"
    NE = "ne"
    FGE = "uge"
    FGT = "ugt"
    FLE = "ule"
    FLT = "ult"
    FEQ = "ueq"
    FNE = "une"
    PHI = "phi"
    CALL = "call"
    GETELEMENTPTR = "getelementptr"
    ZEXT = "zext"
    FPTOSI = "fptosi"
    SITOFP = "sitofp"


_ICMP_OPS = frozenset({OpID.GE, OpID.GT, OpID.LE, OpID.LT, OpID.EQ, OpID.NE})
_FCMP_OPS = frozenset({OpID.FGE, OpID.FGT, OpID.FLE, OpID.FLT, OpID.FEQ, OpID.FNE})
_VOID_OPS = frozenset({OpID.RET, OpID.BR, OpID.STORE})


def op_name(op_id: OpID) -> str:
    """The mnemonic of an opcode as it appears in printed IR."""
    try:
        return OpID(op_id).value
    except ValueError:
        raise IRError(f"unknown opcode {op_id!r}") from None


class Instruction(User):
    """An instruction; it joins ``parent`` on creation when one is given."""

    def __init__(self, type: Type, op_id: OpID, parent: BasicBlock | None = None):
        super().__init__(type, "")
        self.op_id = op_id
        self.parent = parent
        if parent is not None:
            parent.add_instruction(self)

    def function(self) -> Function:
        if self.parent is None:
            raise IRError("instruction is not inside a basic block")
        return self.parent.parent

    def module(self) -> Module:
        if self.parent is None:
            raise IRError("instruction is not inside a basic block")
        return self.parent.module()

    def op_name(self) -> str:
        return op_name(self.op_id)

    def is_void(self) -> bool:
        return self.op_id in _VOID_OPS or (
            self.op_id is OpID.CALL and self.type.is_void_type()
        )

    def is_call(self) -> bool:
        return self.op_id is OpID.CALL

    def is_br(self) -> bool:
        return self.op_id is OpID.BR

    def is_ret(self) -> bool:
        return self.op_id is OpID.RET

    def is_store(self) -> bool:
        return self.op_id is OpID.STORE

    def is_load(self) -> bool:
        return self.op_id is OpID.LOAD

    def is_alloca(self) -> bool:
        return self.op_id is OpID.ALLOCA

    def is_gep(self) -> bool:
        return self.op_id is OpID.GETELEMENTPTR

    def is_cmp(self) -> bool:
        return self.op_id in _ICMP_OPS

    def is_fcmp(self) -> bool:
        return self.op_id in _FCMP_OPS

    def _detach(self) -> None:
        """Called when the instruction is erased from its block."""

    def _result_prefix(self) -> str:
        return "" if self.is_void() else f"%{self.name} = "

    def __str__(self) -> str:
        text = self._result_prefix() + self.op_name()
        operands = [op.as_operand(True) for op in self.operands if op is not None]
        if operands:
            text += " " + ", ".join(operands)
        return text