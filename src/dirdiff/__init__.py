"""Quick-look comparison of two directory trees."""

__version__ = "0.1.0"
