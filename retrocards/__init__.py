"""Roguelike card battler and chat-room intro on a 40x25 character screen."""

__version__ = "0.1.0"