"""Errors raised by hints while reading and writing VM memory."""


class HintError(Exception):
    """Base exception for all hint errors."""

    pass


class UnknownIdentifier(HintError):
    """Raised when a variable cannot be resolved to an address in the current frame."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown identifier {name}")


class IdentifierHasNoMember(HintError):
    """Raised when a member cell of a resolved variable is missing or not a felt."""

    def __init__(self, name: str, member: str):
        self.name = name
        self.member = member
        super().__init__(f"Identifier {name} has no member {member}")


class DividedByZero(HintError, ZeroDivisionError):
    """Raised when a hint is asked to divide by a value that packs to zero."""

    def __init__(self):
        super().__init__("Attempted to divide by zero")


class UnknownHint(HintError):
    """Raised when no native implementation is registered for a hint code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown hint: {code}")


class MemoryReadError(HintError):
    """Raised when a memory cell is absent or does not hold a field element."""

    def __init__(self, addr):
        self.addr = addr
        super().__init__(f"Expected integer at address {addr}")
