"""borc - incremental build orchestrator for native C++ projects."""

__version__ = "0.1.0"
