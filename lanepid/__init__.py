"""PID steering control along lane and parking paths, with message types and parameter loading."""

__version__ = "0.1.0"