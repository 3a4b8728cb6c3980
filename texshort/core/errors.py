"""
Conversion exceptions.

Every structural failure aborts the whole conversion; the caller receives a
single error naming the violated rule and the buffer position.
"""

from typing import Any, Dict, Optional


class ConversionError(Exception):
    """Base exception for conversion errors"""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.position = position
        self.details = details or {}
        if position is not None:
            self.details.setdefault("position", position)
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Standardized error payload"""
        return {
            "error": {
                "type": self.__class__.__name__,
                "message": self.message,
                "details": self.details,
            }
        }


class BoundaryBracketError(ConversionError):
    """Raised when a bracket scan starts with no room to proceed"""

    def __init__(self, position: int, direction: str):
        super().__init__(
            message=f"Bracket at position {position} has no room to scan {direction}",
            position=position,
            details={"direction": direction}
        )


class UnbalancedBracketError(ConversionError):
    """Raised when a bracket scan runs off the buffer before closing"""

    def __init__(self, position: int, direction: str, depth: int):
        super().__init__(
            message=f"Unbalanced bracket at position {position} (scanning {direction})",
            position=position,
            details={"direction": direction, "depth": depth}
        )


class InternalInvariantError(ConversionError):
    """Raised when an operand boundary falls outside the recognized classes"""

    def __init__(self, position: int, char: str, side: str):
        super().__init__(
            message=f"Illegal {side} operand boundary {char!r} at position {position}",
            position=position,
            details={"char": char, "side": side}
        )


class IterationLimitError(ConversionError):
    """Raised when a rewrite loop exceeds its iteration bound"""

    def __init__(self, stage: str, limit: int):
        super().__init__(
            message=f"{stage} did not converge within {limit} steps",
            details={"stage": stage, "limit": limit}
        )


class PatternTableError(ConversionError):
    """Raised when the pattern table cannot be built"""

    def __init__(self, message: str, key: Optional[str] = None):
        details = {"key": key} if key else {}
        super().__init__(message=message, details=details)
