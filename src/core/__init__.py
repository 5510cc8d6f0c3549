"""Core: modelos, parsers y bucles de lectura.

No depende de Typer; la única E/S pasa por `core.interfaces.console`.
"""
