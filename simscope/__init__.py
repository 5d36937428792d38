"""simscope - in-process diagnostics overlay for running simulations."""

__version__ = "0.1.0"
