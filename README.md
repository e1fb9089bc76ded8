# jianmu

`jianmu` holds the core data structures of a compact SSA intermediate
representation modelled on a subset of LLVM IR: types, values with use
tracking, constants, global variables, functions, basic blocks and a generic
instruction class. A module built from them prints as LLVM-style text.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Building IR

A `Module` owns and interns the types, so everything starts from one:

```python
from jianmu.ir.module import Module
from jianmu.ir.types import ArrayType, FunctionType
from jianmu.ir.constants import ConstantInt, ConstantZero
from jianmu.ir.global_variable import GlobalVariable
from jianmu.ir.function import Function
from jianmu.ir.basic_block import BasicBlock
from jianmu.ir.instruction import Instruction, OpID

module = Module()
i32 = module.int32_type

GlobalVariable.create("x", module, ArrayType.get(i32, 1), False,
                      ConstantZero.get(i32, module))

main = Function.create(FunctionType.get(i32, []), "main", module)
entry = BasicBlock.create(module, "entry", main)

ret = Instruction(module.void_type, OpID.RET, entry)
ret.add_operand(ConstantInt.get(0, module))

print(module)
```

prints

```
@x = global [1 x i32] zeroinitializer
define i32 @main() {
entry:
  ret i32 0
}
```

What the modules provide:

* `jianmu.ir.types`: `Type` with `TypeID`, `IntegerType` (`i1`, `i32`),
  `FloatType`, `PointerType`, `ArrayType` and `FunctionType`, their sizes in
  bytes and their text form. Misuse raises `IRError`.
* `jianmu.ir.values`: `Value`, `User` and `Use`. Every value keeps a list of
  its uses; `replace_all_use_with` and `replace_use_with_if` rewrite the
  operands of its users in place.
* `jianmu.ir.module`: `Module`, which interns pointer, array and function
  types and keeps the functions and global variables in creation order.
* `jianmu.ir.constants`: `ConstantInt` (interned per module; a `bool` gives
  an `i1` constant printed as `true`/`false`), `ConstantFP` (rounded to single
  precision, printed as the hex bits of the double), `ConstantArray` and
  `ConstantZero`.
* `jianmu.ir.global_variable`: `GlobalVariable`, whose type is a pointer to
  the stored type.
* `jianmu.ir.function`: `Function` and `Argument`. A function with no basic
  blocks prints as a `declare`.
* `jianmu.ir.basic_block`: `BasicBlock`, which refuses instructions after a
  `ret` or `br`, tracks predecessor and successor blocks, and prints its
  predecessors in a `; preds =` comment.
* `jianmu.ir.instruction`: the `OpID` opcode table, `op_name`, and the
  `Instruction` base class, which joins its block on creation and prints as
  its mnemonic followed by its typed operands.

Unnamed arguments, blocks and instruction results are named `%argN`,
`%labelN` and `%opN` when a function or module is printed.

## What the package does not do

There are no typed instruction classes: no constructors that check operand
types for arithmetic, comparisons, calls, branches, loads, stores, `alloca`,
`getelementptr`, casts or `phi`, and no instruction-specific printing for
them. Branches made with the generic `Instruction` class do not link the
predecessor and successor lists of blocks; use
`BasicBlock.add_pre_basic_block` and `BasicBlock.add_succ_basic_block` for
that. There are no analysis or optimisation passes, no front end that reads
source code, no code generator and no command-line tool.