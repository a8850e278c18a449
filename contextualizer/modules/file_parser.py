#!/usr/bin/env python3

"""
Module for extracting text from different file types

Author: Marc Rivero | @seifreed
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path

import pdfplumber
from bs4 import BeautifulSoup
from tqdm import tqdm

from contextualizer.modules.exceptions import (
    FileExistenceError,
    HTMLProcessingError,
    PDFProcessingError,
    TextProcessingError,
    UnsupportedFileTypeError,
)
from contextualizer.modules.logger import get_logger

logger = get_logger(__name__)

FILE_TYPES = ("pdf", "html", "text")

EXTENSION_MAP = {
    ".pdf": "pdf",
    ".html": "html",
    ".htm": "html",
    ".xml": "html",
}


class FileParser(ABC):
    """Abstract base class for all file parsers."""

    def __init__(self, file_path: str | Path) -> None:
        """
        Initialize the file parser.

        Args:
            file_path: Path to the file to parse
        """
        self.file_path = Path(file_path)

        if not self.file_path.is_file():
            raise FileExistenceError(str(self.file_path))

    @abstractmethod
    def extract_text(self) -> str:
        """
        Extract text from the file.

        Returns:
            The extracted text content
        """


class TextParser(FileParser):
    """Read plain text files."""

    def extract_text(self) -> str:
        logger.info("Reading text file: %s", self.file_path)
        try:
            return self.file_path.read_text(encoding="utf-8", errors="ignore")
        except OSError as exc:
            raise TextProcessingError(str(exc)) from exc


class PDFParser(FileParser):
    """Class for extracting text from PDF files."""

    def extract_text(self) -> str:
        """
        Extract page text and table rows from a PDF file.

        Returns:
            The extracted text content
        """
        logger.info("Extracting text from PDF: %s", self.file_path)

        chunks: list[str] = []
        try:
            with pdfplumber.open(self.file_path) as pdf:
                for page in tqdm(pdf.pages, desc="Processing pages", unit="page", leave=False):
                    chunks.append(page.extract_text() or "")

                    # Tables may hold indicators the text layer splits apart
                    for table in page.extract_tables() or []:
                        for row in table or []:
                            if row:
                                chunks.append(" ".join(str(cell) for cell in row if cell))
        except Exception as exc:
            raise PDFProcessingError(str(exc)) from exc

        return "\n".join(chunks)


class HTMLParser(FileParser):
    """Class for extracting text from HTML files."""

    def extract_text(self) -> str:
        """
        Extract visible text from an HTML file.

        Returns:
            The extracted text content with whitespace collapsed
        """
        logger.info("Extracting text from HTML: %s", self.file_path)

        try:
            content = self.file_path.read_text(encoding="utf-8", errors="ignore")
            soup = BeautifulSoup(content, "html.parser")

            for tag in soup(["script", "style", "meta", "noscript", "head"]):
                tag.decompose()

            text = soup.get_text(separator=" ", strip=True)
        except Exception as exc:
            raise HTMLProcessingError(str(exc)) from exc

        return re.sub(r"\s+", " ", text)


PARSERS: dict[str, type[FileParser]] = {
    "pdf": PDFParser,
    "html": HTMLParser,
    "text": TextParser,
}


def detect_file_type(file_path: str | Path) -> str:
    """Detect the file type from its extension, defaulting to text."""
    return EXTENSION_MAP.get(Path(file_path).suffix.lower(), "text")


def get_parser(file_path: str | Path, file_type: str | None = None) -> FileParser:
    """
    Return the appropriate parser for a file.

    Args:
        file_path: Path to the file
        file_type: Force a specific file type (pdf, html, text)

    Returns:
        The parser for the file

    Raises:
        UnsupportedFileTypeError: If a forced file type is unknown
        FileExistenceError: If the file does not exist
    """
    resolved_type = file_type or detect_file_type(file_path)
    parser_class = PARSERS.get(resolved_type)
    if parser_class is None:
        raise UnsupportedFileTypeError(resolved_type)
    return parser_class(file_path)
