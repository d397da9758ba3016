"""Dummy forms connector."""

from formsconnector.connectors import SubmissionProtocol

from .base import BaseConnector


class DummyConnector(BaseConnector):
    """Dummy connector doing nothing."""

    handle = "dummy"
    name = "Dummy"

    def process(self, submission: SubmissionProtocol, config: dict) -> None:
        """Process a submission."""
