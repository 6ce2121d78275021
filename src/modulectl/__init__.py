"""modulectl — module driver documentation and product registration CLI."""

__version__ = "1.0.0"
