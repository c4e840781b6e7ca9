"""Set-associative cache model with LRU replacement and a trace-replay command."""

__version__ = "0.1.0"