"""shipctl — interactive configuration builder for release automation."""

__version__ = "0.3.0"
