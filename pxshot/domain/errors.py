from __future__ import annotations


class PxshotError(RuntimeError):
    """Base error; raised directly for undecodable payloads and result misuse."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PxshotError):
    pass


class HttpError(PxshotError):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiError(PxshotError):
    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code
