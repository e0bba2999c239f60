"""Exceptions for programmer and deployment errors. Player input never raises."""


class PhoenixError(Exception):
    pass


class WorldDefinitionError(PhoenixError):
    """The static room/item tables break one of their invariants."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("Invalid world definition:\n  " + "\n  ".join(self.problems))


class ConfigError(PhoenixError):
    pass


class UnknownSessionError(PhoenixError, KeyError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(session_id)

    def __str__(self) -> str:
        return f"No session '{self.session_id}'"
