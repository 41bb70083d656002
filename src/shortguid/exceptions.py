"""Custom exceptions with helpful error messages."""


class ShortGuidError(ValueError):
    """Base exception for shortguid errors."""

    pass


class InvalidEncodingError(ShortGuidError):
    """Text is not a base64-encoded 16 byte identifier."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(
            f"Invalid ShortGuid encoding '{text}': {reason}.\n\n"
            f"A ShortGuid is 22 characters drawn from A-Z, a-z, 0-9, '-' and '_'."
        )


class TamperedEncodingError(ShortGuidError):
    """Text decodes to an identifier but is not its canonical encoding."""

    def __init__(self, text: str, expected: str):
        self.text = text
        self.expected = expected
        super().__init__(
            f"Invalid strict ShortGuid encoding '{text}': "
            f"the decoded identifier encodes as '{expected}'.\n\n"
            f"The input may have been tampered with, or its last character "
            f"carries bits that are not part of the identifier."
        )


class ParseError(ShortGuidError):
    """Text is neither a ShortGuid nor a canonical UUID."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"Could not parse '{text}' as a ShortGuid or UUID.\n\n"
            f"Accepted formats:\n"
            f"1. ShortGuid: 22 base64 characters (e.g. 00amyWGct0y_ze4lIsj2Mw)\n"
            f"2. UUID: 32 hex digits with 4 dashes "
            f"(xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx)"
        )
