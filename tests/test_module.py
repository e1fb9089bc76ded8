import pytest

from jianmu.ir.constants import ConstantInt
from jianmu.ir.global_variable import GlobalVariable
from jianmu.ir.module import Module
from jianmu.ir.types import PointerType


class _RecordingFunction:
    def __init__(self, text):
        self.text = text
        self.named = 0

    def set_instr_name(self):
        self.named += 1

    def __str__(self):
        return self.text


@pytest.fixture
def module():
    return Module()


def test_pointer_types_interned(module):
    assert module.pointer_type(module.int32_type) is module.int32_ptr_type
    assert PointerType.get(module.float_type) is module.float_ptr_type
    assert module.float_ptr_type.pointer_element_type() is module.float_type


def test_array_types_interned(module):
    i32 = module.int32_type
    assert module.array_type(i32, 4) is module.array_type(i32, 4)
    assert module.array_type(i32, 5).num_elements == 5
    assert module.array_type(i32, 5) is not module.array_type(i32, 4)


def test_function_types_interned(module):
    i32 = module.int32_type
    first = module.function_type(i32, [i32])
    assert module.function_type(i32, (i32,)) is first
    assert first.params == (i32,)


def test_types_belong_to_their_module(module):
    other = Module()
    assert module.int32_type.module is module
    assert other.int32_type.module is other
    assert other.int32_type is not module.int32_type


def test_empty_module_prints_nothing(module):
    assert str(module) == ""


def test_print_lists_globals_then_functions(module):
    function = _RecordingFunction("define fake")
    module.add_function(function)
    variable = GlobalVariable.create(
        "g", module, module.int32_type, False, ConstantInt.get(0, module)
    )
    text = str(module)
    assert text.splitlines() == [str(variable), "define fake"]
    assert text.endswith("\n")
    assert function.named == 1


def test_set_print_name_names_every_function(module):
    functions = [_RecordingFunction("f"), _RecordingFunction("g")]
    for function in functions:
        module.add_function(function)
    module.set_print_name()
    assert [f.named for f in functions] == [1, 1]
    assert module.functions == functions


def test_add_global_variable(module):
    variable = GlobalVariable.create("x", module, module.int32_type, False)
    assert module.global_variables == [variable]