"""Parse and format bandwidth values with decimal or binary prefixes."""

__version__ = "0.1.3"