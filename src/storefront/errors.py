"""Storefront error types. Domain operations accept any number and never raise these."""


class StorefrontError(Exception):
    """Base for all storefront errors."""


class InvalidAmountError(StorefrontError, ValueError):
    """Text that cannot be read as a decimal number."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Not a number: {value!r}")
        self.value = value


class UnknownStrategyError(StorefrontError, KeyError):
    """No strategy registered under the requested key."""

    def __init__(self, kind: str, key: str, known: list[str]) -> None:
        super().__init__(kind, key)
        self.kind = kind
        self.key = key
        self.known = known

    def __str__(self) -> str:
        choices = ", ".join(self.known) or "none"
        return f"Unknown {self.kind} strategy {self.key!r} (known: {choices})"


class UnknownCommandError(StorefrontError, KeyError):
    """No handler registered for the command type."""

    def __init__(self, cmd_type: type) -> None:
        super().__init__(cmd_type)
        self.cmd_type = cmd_type

    def __str__(self) -> str:
        return f"No handler for command {self.cmd_type.__name__}"


class StrategyArgumentError(StorefrontError, TypeError):
    """Arguments do not fit the strategy factory (e.g. a percentage without a percent)."""

    def __init__(self, kind: str, key: str, reason: str) -> None:
        super().__init__(f"Bad arguments for {kind} strategy {key!r}: {reason}")
        self.kind = kind
        self.key = key


class InvalidItemError(StorefrontError, ValueError):
    """Product text not of the form NAME=PRICE."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Expected NAME=PRICE, got {raw!r}")
        self.raw = raw


class InvalidLogLevelError(StorefrontError, ValueError):
    """Log level name unknown to the logging module."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Unknown log level: {level!r}")
        self.level = level
