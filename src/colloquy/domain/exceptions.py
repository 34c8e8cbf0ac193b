class MessageError(Exception):
    """Base class for every message-model failure."""

    pass


class InvalidArgumentError(MessageError, ValueError):
    """Raise when a message is constructed from invalid arguments."""

    pass


class UnsupportedOperationError(MessageError, TypeError):
    """Raise when an operation is not defined for the given message type."""

    pass


class PreconditionError(MessageError, ValueError):
    """Raise when a message sequence does not satisfy an operation's precondition."""

    pass


class UnknownVariantError(MessageError, KeyError):
    """Raise when a serialized message carries an unregistered discriminator."""

    def __str__(self) -> str:
        # KeyError repr()s its argument, keep the plain message
        return str(self.args[0]) if self.args else ""
