"""Core data structures of a typed SSA intermediate representation."""

__version__ = "0.1.0"