class KeyMismatchError(ValueError):
    """Requests and response handlers are not wired 1:1 by key."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class MissingHandlerError(KeyMismatchError):
    def __init__(self, key: str):
        super().__init__(key, f"no response handler registered for key {key!r}")


class MissingResponseError(KeyMismatchError):
    def __init__(self, key: str):
        super().__init__(key, f"no response received for handler key {key!r}")
