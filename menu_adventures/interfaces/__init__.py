"""Interfaces the engine can talk through."""

from menu_adventures.interfaces.console import ConsoleInterface
from menu_adventures.interfaces.scripted import ScriptedInterface

__all__ = ["ConsoleInterface", "ScriptedInterface"]
