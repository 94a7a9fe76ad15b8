from __future__ import annotations


class EscPrintError(Exception):
    """Base class for errors raised by escprint."""


class ValidationError(EscPrintError, ValueError):
    """Input rejected before anything was sent to the printer."""


class TransportError(EscPrintError, RuntimeError):
    """Writing to the output sink failed."""
