"""Types, values, constants, globals, functions, blocks and the base instruction class."""