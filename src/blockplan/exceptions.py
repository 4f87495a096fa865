"""Custom exceptions for blockplan."""


class BlockplanError(Exception):
    """Base exception for blockplan operations."""


class ParseError(BlockplanError):
    """Error while loading a document into blocks."""
