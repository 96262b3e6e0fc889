"""Error hierarchy shared by the ordering bounded contexts.

Two families of failure cross the service boundary:

- ``ValidationError``: the request itself is malformed (short product name,
  quantity out of bounds, unknown priority). Raised before any collaborator
  is consulted. Carries a ``{field: [messages]}`` mapping.
- ``InvalidOperationError``: the request is well-formed but a business rule
  refused it after collaborators were consulted (discount cap, stock,
  payment).

Expected negative outcomes (stale update, cancelling a shipped order) are not
errors and are reported as ``False`` by the service instead.
"""


class OrderingError(Exception):
    """Base class for all ordering errors."""


class ValidationError(OrderingError):
    def __init__(self, messages: dict[str, list[str]]) -> None:
        self.messages = messages
        super().__init__(messages)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls({field: [message]})


class InvalidOperationError(OrderingError):
    pass


class ObjectNotFoundError(OrderingError):
    pass
