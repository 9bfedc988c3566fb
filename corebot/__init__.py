"""Decision logic for bots in a real-time core-versus-core strategy game."""

__version__ = "0.1.0"