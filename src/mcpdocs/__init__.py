"""mcpdocs - keyword search over a local documentation corpus."""

__version__ = "0.1.0"
