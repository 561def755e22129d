"""Exceptions raised while reading the engine's messages."""


class ProtocolError(ValueError):
    """A line the parser cannot act on: unknown command or wrong argument count."""


class UnknownIdError(LookupError):
    """A region or continent id that is not present on the map being queried."""

    def __init__(self, kind: str, item_id: int):
        super().__init__(f"Unknown {kind} {item_id}")
        self.kind = kind
        self.item_id = item_id
