"""Small TCP/IP exercises: address helpers, host lookup and simple socket programs."""

__version__ = "0.1.0"