"""Ring buffers, persistent attributes, signals, utilities and a threaded WebSocket client."""

__version__ = "1.4.0"