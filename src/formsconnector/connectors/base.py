"""Forms connector base module."""

from abc import ABC, abstractmethod

from formsconnector.connectors import FieldDescriptor, SubmissionProtocol


class BaseConnector(ABC):
    """Base class for all form submission connectors."""

    handle: str = ""
    name: str = ""
    fields: tuple[FieldDescriptor, ...] = ()

    def fieldset(self) -> list[dict]:
        """Return the settings schema the host renders for this connector."""
        return [descriptor.as_dict() for descriptor in self.fields]

    @abstractmethod
    def process(self, submission: SubmissionProtocol, config: dict) -> None:
        """
        Forward a form submission to the remote service.

        Args:
            submission: The submission to forward
            config: Connector settings for the submitted form

        Note:
            Implementations must not raise: failures are logged and the
            host carries on.

        """
