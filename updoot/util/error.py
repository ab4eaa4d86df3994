"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class JWTError(UtilError):
    """Session token could not be decoded or has expired."""

    pass
