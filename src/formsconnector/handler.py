"""Forms connectors handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from formsconnector.exceptions import ConnectorInvalidBackendError, ConnectorNotFoundError


class ConnectorHandler:
    """Connector handler managing the connectors instantiation."""

    def __init__(self, backends=None):
        """Initialize the connector handler."""
        # backends is an optional list of connector definitions
        # (structured like settings.FORMS_CONNECTORS).
        self._backends = backends
        self._connectors = None

    @cached_property
    def backends(self):
        """Put in cache the connector definitions from the settings."""
        if self._backends is None:
            try:
                self._backends = list(settings.FORMS_CONNECTORS)
            except (AttributeError, TypeError) as e:
                raise ImproperlyConfigured("settings.FORMS_CONNECTORS is not configured") from e
        return self._backends

    def __call__(self):
        """Create if not existing the connectors and then return them keyed by handle."""
        if self._connectors is None:
            connectors = (self.create_connector(params) for params in self.backends)
            self._connectors = {connector.handle: connector for connector in connectors}
        return self._connectors

    def create_connector(self, params):
        """Instantiate and configure a connector."""
        params = params.copy()
        backend = params.pop("BACKEND")
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise ConnectorInvalidBackendError(f"Could not find connector {backend!r}: {e}") from e
        return klass(**parameters)

    def get(self, handle):
        """Return the connector registered under the given handle."""
        try:
            return self()[handle]
        except KeyError as e:
            raise ConnectorNotFoundError(f"No connector registered for {handle!r}") from e

    def process_submission(self, handle, submission, config):
        """Forward a submission to the connector registered under the given handle."""
        self.get(handle).process(submission, config)
