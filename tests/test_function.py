import pytest

from jianmu.ir.basic_block import BasicBlock
from jianmu.ir.function import Argument, Function
from jianmu.ir.instruction import Instruction, OpID
from jianmu.ir.module import Module
from jianmu.ir.types import IRError


def make(module, ret=None, params=()):
    ft = module.function_type(ret or module.int32_type, list(params))
    return Function.create(ft, "f", module)


def test_create_registers_and_builds_args():
    module = Module()
    func = make(module, params=[module.int32_type, module.float_type])
    assert module.functions == [func]
    assert func.num_of_args() == 2
    assert [a.type for a in func.args] == [module.int32_type, module.float_type]
    assert [a.arg_no for a in func.args] == [0, 1]
    assert all(a.parent is func for a in func.args)
    assert func.return_type() is module.int32_type


def test_declaration_and_entry():
    module = Module()
    func = make(module)
    assert func.is_declaration()
    with pytest.raises(IRError):
        func.entry_block()
    entry = BasicBlock(module, "entry", func)
    assert not func.is_declaration()
    assert func.entry_block() is entry


def test_print_declaration():
    module = Module()
    func = make(module, params=[module.int32_type, module.float_type])
    assert str(func) == "declare i32 @f(i32, float)\n"


def test_print_definition():
    module = Module()
    func = make(module, params=[module.int32_type])
    block = BasicBlock(module, "entry", func)
    Instruction(module.void_type, OpID.RET, block)
    text = str(func)
    assert text.startswith("define i32 @f(i32 %arg0) {\nentry:\n")
    assert text.endswith("}")
    assert text == "define i32 @f(i32 %arg0) {\n" + str(block) + "}"


def test_argument_print():
    module = Module()
    arg = Argument(module.float_type, "x")
    assert str(arg) == "float %x"


def test_set_instr_name_numbers_unnamed_values():
    module = Module()
    func = make(module, params=[module.int32_type])
    entry = BasicBlock(module, "entry", func)
    result = Instruction(module.int32_type, OpID.ADD, entry)
    store = Instruction(module.void_type, OpID.STORE, entry)
    other = BasicBlock(module, "", func)
    func.set_instr_name()
    assert func.args[0].name == "arg0"
    assert entry.name == "entry"
    assert result.name == "op1"
    assert store.name == ""
    assert other.name == "label2"


def test_set_instr_name_continues_counting():
    module = Module()
    func = make(module)
    first = BasicBlock(module, "", func)
    func.set_instr_name()
    func.set_instr_name()
    assert first.name == "label0"
    second = BasicBlock(module, "", func)
    func.set_instr_name()
    assert second.name == "label1"


def test_remove_block_updates_neighbours():
    module = Module()
    func = make(module)
    a = BasicBlock(module, "a", func)
    b = BasicBlock(module, "b", func)
    c = BasicBlock(module, "c", func)
    a.add_succ_basic_block(b)
    b.add_pre_basic_block(a)
    b.add_succ_basic_block(c)
    c.add_pre_basic_block(b)
    func.remove(b)
    assert func.basic_blocks == [a, c]
    assert a.succ_basic_blocks == []
    assert c.pre_basic_blocks == []


def test_module_prints_function():
    module = Module()
    make(module)
    assert str(module) == "declare i32 @f()\n\n"