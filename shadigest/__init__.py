"""SHA-256 digests of bytes, binary streams and files, with a file-hashing command."""

__version__ = "1.0.0"
__all__ = ["core", "cli"]