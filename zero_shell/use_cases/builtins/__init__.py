"""Builtin commands. Each module holds one use case keyed by its command name."""
