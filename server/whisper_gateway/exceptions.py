"""Custom exceptions for the transcription gateway."""


class MissingCredentialError(RuntimeError):
    """Raised when the outbound API credential is not configured."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"{variable} missing; set it in the environment or .env")


class InvalidTranscriptNameError(Exception):
    """Raised when a requested transcript name could escape the uploads directory."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Invalid transcript name '{file_name}'")


class TranscriptNotFoundError(Exception):
    """Raised when a requested transcript file does not exist."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Transcript '{file_name}' not found")
