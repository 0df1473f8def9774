"""Translate pseudocode into C++ and build it with g++."""

__version__ = "0.1.0"
__all__ = ["lexer", "nodes", "parser", "cli"]