"""Push source segments from a CAT workflow to the Juremy search interface."""

__version__ = "0.1.0"
