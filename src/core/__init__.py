"""
Core numeric engine: base codec, fixed-width arithmetic, unit conversion tables.

This module contains the foundational building blocks that are independent
of any user interface (menus, prompting, console output).
"""
