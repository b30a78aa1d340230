"""Shared exceptions module."""

from typing import Optional


class CrowdtrackException(Exception):
    """Base exception for crowdtrack."""

    pass


class SinkConfigurationError(CrowdtrackException):
    """Exception raised when a sink is enabled without the settings it needs."""

    def __init__(self, sink: str, message: Optional[str] = "Sink is missing required settings"):
        """Create a new SinkConfigurationError instance.

        Args:
        ----
            sink (str): Name of the misconfigured sink.
            message (str, optional): The error message. Has default message.

        """
        self.sink = sink
        self.message = message
        super().__init__(f"{message}: {sink}")
