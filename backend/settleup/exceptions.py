"""Errors raised by the settlement workflow."""


class SettleUpError(Exception):
    """Base exception for all settleup errors"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class SettlementStateError(SettleUpError):
    """Raised when a split is not in the state a transition needs"""
    pass


class SettlementPermissionError(SettleUpError):
    """Raised when the acting participant may not perform a transition"""
    pass


class InvalidSettlementAction(SettleUpError):
    """Raised for an action outside request/confirm/reject/cancel"""
    pass
