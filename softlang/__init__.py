"""Runtime values, native standard library and a bytecode virtual machine for the Soft language."""

__version__ = "0.1.0"