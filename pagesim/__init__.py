"""Page replacement simulation with FIFO and LFU policies and a text front end."""

__version__ = "0.1.0"
__all__ = ["policies", "cli"]