from __future__ import annotations


class ConversionError(ValueError):
    pass


class ParseError(ConversionError):
    pass


class EmptyInputError(ParseError):
    def __init__(self) -> None:
        super().__init__("Failed to parse empty value")


class MalformedInputError(ParseError):
    def __init__(self, value: str, reason: str = "") -> None:
        self.value = value
        message = f"Unknown format of {value!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnknownUnitError(ParseError):
    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"Unknown unit {unit!r}")


class FractionalBaseUnitError(ParseError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Value {value!r} resulted in fractional number of Wei")


class NegativeResultError(ParseError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Value {value!r} resulted in negative number of Wei")


class UnitOverflowError(ConversionError):
    def __init__(self, tier: int) -> None:
        self.tier = tier
        super().__init__(f"No unit available for tier {tier}, value is too large to display")


class ConfigLockError(Exception):
    pass
