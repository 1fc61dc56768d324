# marklist/core/exceptions.py
# Custom exception hierarchy for Marklist (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for Marklist application
class MarklistError(Exception):
    pass


# * Configuration errors
class ConfigurationError(MarklistError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * Mark alphabet is empty, has duplicate glyphs or malformed keys
# ValueError base lets settings validation treat it like any other bad value
class AlphabetError(ConfigurationError, ValueError):
    pass


# * Action keys collide w/ each other or w/ mark keys
class KeymapError(ConfigurationError, ValueError):
    pass


# * JSON parsing errors
class JSONParsingError(MarklistError):
    pass


# * Base error for document processing
class DocumentError(MarklistError):
    pass


# * Lookup-related exceptions
class LookupProviderError(MarklistError):
    pass


# * Provider-specific error (HTTP errors, malformed responses)
class ProviderError(LookupProviderError):
    def __init__(self, message: str, provider: str):
        super().__init__(message)
        self.provider = provider

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, provider={self.provider!r})"
        )


# * Requested lookup provider is not registered
class UnknownProviderError(LookupProviderError):
    def __init__(self, message: str, provider: str):
        super().__init__(message)
        self.provider = provider


# * Base error for file I/O operations
class FileOperationError(MarklistError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
