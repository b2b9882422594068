"""Answers to classic numbered programming problems, as functions and a command-line solver."""

__version__ = "0.1.0"