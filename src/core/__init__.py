"""
Core arithmetic: magnitude primitives and the BigInt value type.

This package has no external state: no I/O, no configuration, no
global mutable objects. Everything here is a pure function or an
immutable value.
"""
