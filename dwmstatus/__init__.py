"""dwmstatus - status line for the X root window name."""

__version__ = "0.1.0"
