"""Disk balancer specific exceptions."""


class AbortProcedureError(Exception):
    """Exception raised when the procedure must be aborted."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class InvalidClusterError(Exception):
    """Exception raised when the cluster snapshot can't be parsed."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class InvalidArgumentError(ValueError):
    """Exception raised when a required input is missing or malformed."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class NodeNotFoundError(LookupError):
    """Exception raised when the target node is not part of the cluster."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class ConnectivityError(ConnectionError):
    """Exception raised when the target node can't be reached."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class ParseError(ValueError):
    """Exception raised when the node returns an invalid volume mapping."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class ArtifactWriteError(OSError):
    """Exception raised when an artifact can't be written."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)
