# -*- coding: utf-8 -*-
"""
LocForge Exceptions Module
Custom exception classes for structured error handling across the tool.
"""


class LocForgeError(Exception):
    """
    Base exception class for all LocForge-related errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Catalog Exceptions
# =============================================================================

class CatalogError(LocForgeError):
    """Base exception for catalog scanning, reading and writing."""
    pass


class CatalogScanError(CatalogError):
    """Raised when the root directory cannot be walked at all. Fatal for the run."""

    def __init__(self, message: str, root: str = None):
        super().__init__(message, details={'root': root})
        self.root = root


class CatalogReadError(CatalogError):
    """Raised when a single catalog file cannot be read or decoded."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path})
        self.file_path = file_path


class CatalogWriteError(CatalogError):
    """Raised when an output catalog cannot be written."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path})
        self.file_path = file_path


# =============================================================================
# AI / Engine Exceptions
# =============================================================================

class AIError(LocForgeError):
    """Base exception for translation backend errors (Gemini, Google, etc.)."""
    pass


class APIKeyError(AIError):
    """Raised when API key is missing or invalid."""
    pass


class ModelError(AIError):
    """Raised when there's an issue with the AI model."""

    def __init__(self, message: str, model_name: str = None):
        super().__init__(message, details={'model': model_name})
        self.model_name = model_name


class TranslationError(AIError):
    """Raised when a single translation request fails."""

    def __init__(self, message: str, source_text: str = None, target_lang: str = None):
        super().__init__(message, details={'source_text': source_text, 'target_lang': target_lang})
        self.source_text = source_text
        self.target_lang = target_lang


class NetworkError(AIError):
    """Raised when there's a network connectivity issue."""
    pass


class EngineNotFoundError(LocForgeError):
    """Raised when the requested translation engine is not registered."""

    def __init__(self, engine_id: str):
        super().__init__(f"Translation engine '{engine_id}' is not registered", details={'engine_id': engine_id})
        self.engine_id = engine_id
