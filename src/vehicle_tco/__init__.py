"""Vehicle TCO calculator — cost breakdown and summary for commercial vehicles."""

__version__ = "1.0.0"
