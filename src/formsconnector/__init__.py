"""Forms to ActiveCampaign connector package."""

from django.utils.functional import LazyObject

from .handler import ConnectorHandler


class DefaultRegistry(LazyObject):
    """Lazy object to handle the registered connectors."""

    def _setup(self):
        """Configure the connectors."""
        self._wrapped = connector_handler()


connector_handler = ConnectorHandler()
registry = DefaultRegistry()
