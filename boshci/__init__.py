__all__ = ["main", "config", "workflows"]

__version__ = "0.3.0"
# PEP396
