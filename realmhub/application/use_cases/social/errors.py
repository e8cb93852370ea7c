"""Errors raised by social use cases."""


class ResourceNotFoundError(ValueError):
    """The targeted user, post, comment or realm does not exist."""


class DuplicateActionError(ValueError):
    """The action was already performed by the same user."""


class InvalidActionError(ValueError):
    """The action is not allowed for the given arguments."""


__all__ = ["DuplicateActionError", "InvalidActionError", "ResourceNotFoundError"]
