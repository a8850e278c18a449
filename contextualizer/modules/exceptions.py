#!/usr/bin/env python3

"""
Custom exceptions for contextualizer

Author: Marc Rivero | @seifreed
"""


class ContextualizerError(Exception):
    """Base exception for contextualizer."""


class ValidationError(ContextualizerError):
    """Exception raised for input validation errors."""


class UnknownMatchTypeError(ValidationError):
    """Exception raised when a match type has no pattern."""

    def __init__(self, match_type: str) -> None:
        self.match_type = match_type
        super().__init__(f"Unknown match type: {match_type}")


class UnsupportedFileTypeError(ValidationError):
    """Exception raised for unsupported file types."""

    def __init__(self, file_type: str) -> None:
        self.file_type = file_type
        super().__init__(f"Unsupported file type: {file_type}")


class BaseDomainError(ContextualizerError):
    """Exception raised when a domain has no registrable base domain."""

    def __init__(self, domain: str, reason: str) -> None:
        self.domain = domain
        self.reason = reason
        super().__init__(f"No base domain for {domain!r}: {reason}")


class ConfigurationError(ContextualizerError):
    """Exception raised when a configuration file cannot be read."""

    def __init__(self, config_path: str, reason: str) -> None:
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Failed to read config {config_path}: {reason}")


class FileParsingError(ContextualizerError):
    """Exception raised when file parsing fails."""


class FileExistenceError(FileParsingError):
    """Exception raised when file does not exist or is not accessible."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"The file {file_path} does not exist or is not accessible")


class PDFProcessingError(FileParsingError):
    """Exception raised when PDF processing fails."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Error processing PDF: {reason}")


class TextProcessingError(FileParsingError):
    """Exception raised when a text file cannot be read."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Error reading text file: {reason}")


class HTMLProcessingError(FileParsingError):
    """Exception raised when HTML processing fails."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Error processing HTML: {reason}")


class FileSizeError(ValidationError):
    """Exception raised when file size exceeds limits."""

    def __init__(self, actual_size_mb: float, max_size_mb: float) -> None:
        self.actual_size_mb = actual_size_mb
        self.max_size_mb = max_size_mb
        super().__init__(
            f"File size ({actual_size_mb:.2f}MB) exceeds "
            f"maximum allowed size ({max_size_mb:.2f}MB)",
        )
