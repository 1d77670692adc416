class WebsiteBuilderError(Exception):
    """Base exception for the website builder backend."""

    pass


class ClientInputError(WebsiteBuilderError):
    """Raised when the inbound request is missing required input."""

    pass


class ProviderFailure(WebsiteBuilderError):
    """Raised when the completion provider call fails or times out."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ExtractionError(WebsiteBuilderError):
    """Raised when artifacts cannot be extracted from the model reply."""

    def __init__(self, message: str, excerpt: str):
        self.excerpt = excerpt
        super().__init__(message)


class BlockNotFound(ExtractionError):
    """Raised when the reply has no fenced JSON block."""

    def __init__(self, excerpt: str):
        super().__init__("JSON block not found in model's output", excerpt)


class ParseError(ExtractionError):
    """Raised when the fenced JSON block is not a valid JSON object."""

    def __init__(self, excerpt: str):
        super().__init__("Could not parse JSON from model", excerpt)


class MaterializationError(WebsiteBuilderError):
    """Raised when generated files cannot be saved to disk."""

    pass


class DirectoryCreateFailure(MaterializationError):
    """Raised when the project directory cannot be created."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'Could not create directory "{path}": {reason}')


class FileWriteFailure(MaterializationError):
    """Raised when one or more artifact files could not be written."""

    def __init__(self, failures: dict[str, str]):
        self.failures = failures
        details = "; ".join(f'"{path}": {reason}' for path, reason in failures.items())
        super().__init__(f"Error writing to {details}")


class InternalError(WebsiteBuilderError):
    """Raised for unanticipated failures during generation."""

    pass
