"""Two-seat UNO engine with pluggable participants."""

__version__ = "0.1.0"
