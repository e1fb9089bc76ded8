import pytest

from jianmu.ir.constants import ConstantInt, ConstantZero
from jianmu.ir.global_variable import GlobalVariable
from jianmu.ir.module import Module
from jianmu.ir.types import ArrayType, IRError, PointerType
from jianmu.ir.values import Use


@pytest.fixture
def module():
    return Module()


@pytest.fixture
def array_type(module):
    return ArrayType.get(module.int32_type, 1)


def test_create_wraps_type_in_pointer(module, array_type):
    init = ConstantZero.get(module.int32_type, module)
    variable = GlobalVariable.create("x", module, array_type, False, init)
    assert variable.type is PointerType.get(array_type)
    assert variable.type.pointer_element_type() is array_type
    assert variable.name == "x"


def test_print_global(module, array_type):
    init = ConstantZero.get(module.int32_type, module)
    variable = GlobalVariable.create("x", module, array_type, False, init)
    assert str(variable) == "@x = global [1 x i32] zeroinitializer"


def test_print_constant(module):
    variable = GlobalVariable.create(
        "c", module, module.int32_type, True, ConstantInt.get(7, module)
    )
    assert str(variable) == "@c = constant i32 7"
    assert variable.is_const is True


def test_globals_registered_in_order(module, array_type):
    init = ConstantZero.get(module.int32_type, module)
    x = GlobalVariable.create("x", module, array_type, False, init)
    y = GlobalVariable.create("y", module, array_type, False, init)
    assert module.global_variables == [x, y]


def test_initializer_is_an_operand(module):
    init = ConstantInt.get(3, module)
    variable = GlobalVariable.create("g", module, module.int32_type, False, init)
    assert variable.operands == [init]
    assert Use(variable, 0) in init.use_list


def test_without_initializer(module):
    variable = GlobalVariable.create("g", module, module.int32_type, False)
    assert variable.operands == []
    with pytest.raises(IRError):
        str(variable)


def test_global_as_operand(module, array_type):
    init = ConstantZero.get(module.int32_type, module)
    variable = GlobalVariable.create("x", module, array_type, False, init)
    assert variable.as_operand(False) == "@x"
    assert variable.as_operand(True) == f"{variable.type} @x"