from __future__ import annotations


class MarkerError(Exception):
    """
    A marker image problem the client should see, with the HTTP status to use.
    """

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UnsupportedImageFormat(MarkerError):
    status_code = 415


class ImageTooLarge(MarkerError):
    status_code = 415


class InvalidTint(MarkerError):
    status_code = 400
