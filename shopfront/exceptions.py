"""Application-level exceptions, outside the domain error hierarchy."""


class ShopfrontError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(ShopfrontError):
    """Raised when services cannot be wired from the given configuration."""

    def __init__(self, setting: str, value: object) -> None:
        self.setting = setting
        self.value = value
        super().__init__(f"Unsupported value {value!r} for {setting}")
