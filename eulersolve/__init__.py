"""Project Euler solutions 1 to 60 and the number-theory helpers behind them."""

__version__ = "0.1.0"