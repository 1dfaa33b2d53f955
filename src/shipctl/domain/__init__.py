"""Domain layer — pure data models and rules, no I/O.

Domain modules must never import from services, commands, or output.
"""
