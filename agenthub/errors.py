"""Error taxonomy shared by the registry, dispatcher and stores."""


class AgentHubError(Exception):
    """Base class for all agent hub errors."""


class NotFoundError(AgentHubError):
    """Requested record does not exist."""

    def __init__(self, resource: str, key: str) -> None:
        super().__init__(f"{resource} not found: {key}")
        self.resource = resource
        self.key = key


class BadRequestError(AgentHubError):
    """Input was malformed or contained fields that are not allowed."""


class StoreError(AgentHubError):
    """The underlying record store failed or rejected an operation."""
