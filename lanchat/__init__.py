"""Console chat client, server connection and in-memory message stores."""

__version__ = "0.1.0"