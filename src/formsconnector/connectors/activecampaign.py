"""ActiveCampaign marketing automation integration."""

import logging

import requests

from formsconnector.configuration.values import ActiveCampaignSettings
from formsconnector.connectors import ContactData, FieldDescriptor, SubmissionProtocol
from formsconnector.exceptions import (
    ConfigurationIncompleteError,
    InvalidEmailError,
    RemoteContractViolationError,
    RemoteRejectedError,
    TransportError,
)
from formsconnector.tools.email import is_valid_email

from .base import BaseConnector

CONTACT_SYNC_PATH = "/api/3/contact/sync"
CONTACT_LISTS_PATH = "/api/3/contactLists"
CONTACT_TAGS_PATH = "/api/3/contactTags"

# contactList status meaning "subscribed"
LIST_STATUS_ACTIVE = 1

FIELDSET = (
    FieldDescriptor(
        handle="api_url",
        type="text",
        display="API URL",
        instructions="Your ActiveCampaign API URL (e.g., https://youraccountname.api-us1.com)",
        required=True,
    ),
    FieldDescriptor(
        handle="api_key",
        type="text",
        display="API Key",
        instructions="Your ActiveCampaign API key",
        required=True,
    ),
    FieldDescriptor(
        handle="list_id",
        type="text",
        display="List ID",
        instructions="ActiveCampaign list ID to subscribe to",
        required=True,
    ),
    FieldDescriptor(
        handle="email_field",
        type="text",
        display="Email Field",
        instructions="Form field containing the email address",
        default="email",
    ),
    FieldDescriptor(
        handle="first_name_field",
        type="text",
        display="First Name Field",
        instructions="Form field containing the first name",
        default="first_name",
    ),
    FieldDescriptor(
        handle="last_name_field",
        type="text",
        display="Last Name Field",
        instructions="Form field containing the last name",
        default="last_name",
    ),
    FieldDescriptor(
        handle="tags",
        type="text",
        display="Tags",
        instructions="Comma-separated list of tags to apply",
    ),
    FieldDescriptor(
        handle="field_mapping",
        type="grid",
        display="Custom Field Mapping",
        instructions="Map form fields to ActiveCampaign custom fields",
        fields=(
            FieldDescriptor(handle="form_field", type="text", display="Form Field", width=50),
            FieldDescriptor(
                handle="activecampaign_field",
                type="text",
                display="ActiveCampaign Field ID",
                instructions="Custom field ID from ActiveCampaign",
                width=50,
            ),
        ),
    ),
)


class ActiveCampaignConnector(BaseConnector):
    """
    ActiveCampaign marketing automation integration.

    Handles, for each form submission:
    - Contact creation or update (sync on email)
    - List subscription
    - Tag assignment
    """

    handle = "activecampaign"
    name = "ActiveCampaign"
    fields = FIELDSET

    def __init__(self, timeout: int = 10, logger: logging.Logger | None = None):
        """Configure the ActiveCampaign connector."""
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    def process(self, submission: SubmissionProtocol, config: dict) -> None:
        """
        Forward a form submission to ActiveCampaign.

        Every failure is logged and swallowed, the host never sees an exception.
        List subscription and tag assignment responses are not checked.
        """
        context = {"form": submission.form_handle, "submission_id": submission.id}

        try:
            settings = ActiveCampaignSettings.from_config(config)
        except ConfigurationIncompleteError as err:
            self.logger.warning("ActiveCampaign connector: %s", err, extra=context)
            return

        try:
            contact = self.build_contact(submission.form_data, settings)
        except InvalidEmailError as err:
            self.logger.warning(
                "ActiveCampaign connector: Invalid or missing email in field %r: %r",
                err.email_field,
                err.email,
                extra={**context, "email_field": err.email_field, "email": err.email},
            )
            return

        context["email"] = contact.email

        try:
            contact_id = self.sync_contact(contact, settings)
            self.subscribe_to_list(contact_id, settings)
            self.add_tags(contact_id, settings)
        except RemoteRejectedError as err:
            self.logger.error(
                "ActiveCampaign contact creation failed with status %s: %s",
                err.status_code,
                err.message,
                extra={
                    **context,
                    "status": err.status_code,
                    "error": err.message,
                    "errors": err.errors,
                    "full_response": err.raw_body,
                },
            )
            return
        except RemoteContractViolationError as err:
            self.logger.error(
                "ActiveCampaign: No contact ID returned",
                extra={**context, "response": err.response},
            )
            return
        except Exception as err:  # noqa: BLE001
            self.logger.error(
                "ActiveCampaign connector exception: %s",
                err,
                extra={**context, "error": str(err)},
            )
            return

        self.logger.info(
            "ActiveCampaign contact processed successfully",
            extra={**context, "contact_id": contact_id, "list_id": settings.list_id},
        )

    def build_contact(self, form_data, settings: ActiveCampaignSettings) -> ContactData:
        """
        Build the contact from the submitted values.

        Raises:
            InvalidEmailError: If the email field is missing or not a valid address

        """
        email = form_data.get(settings.email_field)
        if not is_valid_email(email):
            raise InvalidEmailError(settings.email_field, email)

        field_values = [
            {"field": mapping.activecampaign_field, "value": form_data[mapping.form_field]}
            for mapping in settings.field_mapping
            if form_data.get(mapping.form_field) is not None
        ]

        return ContactData(
            email=email,
            first_name=form_data.get(settings.first_name_field),
            last_name=form_data.get(settings.last_name_field),
            field_values=field_values,
        )

    def sync_contact(self, contact: ContactData, settings: ActiveCampaignSettings):
        """
        Create or update the contact and return its ActiveCampaign id.

        Raises:
            RemoteRejectedError: If the API answers with a non-2xx status
            RemoteContractViolationError: If the response has no contact id
            TransportError: If the call fails or the response is not JSON

        """
        response = self._post(settings, CONTACT_SYNC_PATH, contact.as_payload())

        if not 200 <= response.status_code < 300:  # noqa: PLR2004
            try:
                body = response.json()
            except ValueError:
                body = None
            raise RemoteRejectedError(
                response.status_code,
                body=body if isinstance(body, dict) else None,
                raw_body=response.text,
            )

        try:
            result = response.json()
        except ValueError as err:
            raise TransportError(f"Malformed contact sync response: {err}") from err

        contact_id = None
        if isinstance(result, dict) and isinstance(result.get("contact"), dict):
            contact_id = result["contact"].get("id")
        if not contact_id:
            raise RemoteContractViolationError("No contact ID returned", response=result)
        return contact_id

    def subscribe_to_list(self, contact_id, settings: ActiveCampaignSettings) -> None:
        """Subscribe the contact to the configured list."""
        self._post(
            settings,
            CONTACT_LISTS_PATH,
            {
                "contactList": {
                    "list": settings.list_id,
                    "contact": contact_id,
                    "status": LIST_STATUS_ACTIVE,
                }
            },
        )

    def add_tags(self, contact_id, settings: ActiveCampaignSettings) -> None:
        """Attach each configured tag to the contact."""
        for tag in settings.tags:
            self._post(settings, CONTACT_TAGS_PATH, {"contactTag": {"contact": contact_id, "tag": tag}})

    def _post(self, settings: ActiveCampaignSettings, path: str, payload: dict) -> requests.Response:
        """Send a JSON payload to the ActiveCampaign API."""
        try:
            return requests.post(
                f"{settings.api_url}{path}",
                json=payload,
                headers=settings.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as err:
            raise TransportError(f"Request to {path} failed: {err}") from err
