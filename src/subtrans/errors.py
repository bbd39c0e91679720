"""Exception hierarchy for subtrans."""


class SubtransError(Exception):
    """Base error for subtrans."""


class UnsupportedFormatError(SubtransError, ValueError):
    """Raised when a file extension has no registered subtitle format."""


class FormatError(SubtransError, ValueError):
    """Raised when a timestamp or cue cannot be parsed."""


class InvalidArgumentError(SubtransError, ValueError):
    """Raised for invalid arguments such as a non-positive chunk size."""


class OracleError(SubtransError, RuntimeError):
    """Raised when the external translation oracle fails."""

    def __init__(self, message: str, diagnostic: str = "") -> None:
        super().__init__(message)
        self.diagnostic = diagnostic


class ChunkTranslationError(OracleError):
    """Raised when a chunk cannot be translated.

    ``completed`` holds the translated entries of every chunk that finished
    before the failing one, in order.
    """

    def __init__(
        self,
        chunk_number: int,
        total_chunks: int,
        cause: OracleError,
        completed: list | None = None,
    ) -> None:
        super().__init__(
            f"Chunk {chunk_number}/{total_chunks} failed: {cause}",
            diagnostic=cause.diagnostic,
        )
        self.chunk_number = chunk_number
        self.total_chunks = total_chunks
        self.completed = completed or []


class TranslationCancelledError(SubtransError):
    """Raised when a translation run is cancelled between chunks."""

    def __init__(self, completed: list | None = None) -> None:
        super().__init__("Translation cancelled")
        self.completed = completed or []
