class FormatError(ValueError):
    """Base error for malformed or unwritable sprite data."""


class NotASprite(FormatError):
    def __init__(self, magic: bytes) -> None:
        super().__init__(f'Not a valid sprite: expected IDSP tag but got {magic!r}')
        self.magic = magic


class UnsupportedVersion(FormatError):
    def __init__(self, version: int) -> None:
        super().__init__(f'Only version 2 sprites are supported, got {version}')
        self.version = version


class Truncated(FormatError, EOFError):
    def __init__(self, expected: int, given: int) -> None:
        super().__init__(f'Expected {expected} bytes but stream ended after {given}')
        self.expected = expected
        self.given = given


class InvalidFrameDimensions(FormatError):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f'Expected non-negative frame dimensions, got width={width} height={height}',
        )
        self.width = width
        self.height = height


class InvalidFrameCount(FormatError):
    def __init__(self, count: int) -> None:
        super().__init__(f'Expected non-negative frame count, got {count}')
        self.count = count


class PaletteTooLarge(FormatError):
    def __init__(self, size: int) -> None:
        super().__init__(f'Palette cannot hold more than 65535 colors, got {size}')
        self.size = size


class InvalidFieldValue(FormatError):
    def __init__(self, fields: object, reason: str) -> None:
        super().__init__(f'Cannot write {fields!r}: {reason}')
        self.fields = fields
        self.reason = reason
