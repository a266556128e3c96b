class InvalidConfiguration(ValueError):
    """Raised when ramp options cannot describe a valid ramp."""


class UnknownCurveError(InvalidConfiguration, KeyError):
    """Raised when a curve name is not in the catalog or the alias set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown curve: {name!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
