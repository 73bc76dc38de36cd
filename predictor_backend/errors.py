"""
Error kinds raised by the relay and OCR capabilities.

Each carries the HTTP status it is reported with; the handlers registered in
`predictor_backend.main` render them as `{"error": message}`.
"""


class RelayError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(RelayError):
    status_code = 400


class UpstreamUnreachable(RelayError):
    pass


class UpstreamError(RelayError):
    pass


class ServerConfigurationError(RelayError):
    pass


class OcrExecutionError(RelayError):
    pass


class OcrOutputUnreadable(RelayError):
    pass


class UploadStorageError(RelayError):
    pass
