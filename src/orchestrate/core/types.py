"""Core type definitions for the solver."""

from typing import TypeAlias

MAX_ACTIONS = 32
"""Upper bound on catalog size: every state must fit one 32-bit word."""

State: TypeAlias = int
"""Bitmask of active actions. Bit i set means action i is active.

States are plain integers: equality and hashing are the integer's, and every
"add an action" operation returns a new value.
"""
