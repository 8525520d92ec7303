"""Card game pieces: a deck, turn reports, a ranking service client and a console menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]