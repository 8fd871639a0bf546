"""pagestrip: fetch a web page and save a stripped-down copy of its HTML."""

__version__ = "0.1.0"
