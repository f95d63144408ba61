"""Character, string, byte-buffer, linked-list, line-reading and printf helpers with classic C semantics."""

__version__ = "0.1.0"