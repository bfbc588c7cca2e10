"""Member profiles, a bounded sorted member directory and an interactive console session."""

__version__ = "0.1.0"
__all__ = ["__version__"]