"""Resource bookkeeping and keyboard-driven text menus for a simulation game."""

__version__ = "0.1.0"