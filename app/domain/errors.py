# app/domain/errors.py
from typing import Literal

FetchReason = Literal["transport", "payload"]


class FetchError(Exception):
    """
    Raised when the product catalog cannot be retrieved.
    Covers both a failed HTTP exchange and an undecodable body;
    `reason` tells them apart in logs, callers treat them the same.
    """

    def __init__(self, message: str, reason: FetchReason = "transport"):
        super().__init__(message)
        self.reason = reason
