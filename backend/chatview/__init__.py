"""View-state projection for the active chat of a peer-to-peer client."""

__version__ = "0.1.0"
