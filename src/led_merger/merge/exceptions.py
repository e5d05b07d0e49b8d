"""Custom exceptions for configuration merging."""


class MergeError(Exception):
    """Base exception for all merge errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidInstructionError(MergeError):
    """Raised when a mapping is missing what its action requires."""

    def __init__(self, slot: int):
        self.slot = slot
        super().__init__(f"Invalid mapping for slot {slot}")


class TargetSlotNotFoundError(MergeError):
    """Raised when the base configuration has no page for a mapping's slot."""

    def __init__(self, slot: int):
        self.slot = slot
        super().__init__(f"Target page not found for slot {slot}")


class UnknownActionError(MergeError):
    """Raised when a mapping names an action the merger does not know."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Unknown action: {action}")
