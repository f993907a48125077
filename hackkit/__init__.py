"""Hack toolchain CLI.

Provides `hackkit`, `assembler` and `vmtranslator` commands over `libhackkit`.
"""
