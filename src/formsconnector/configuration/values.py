"""Connector settings resolved from the host configuration mapping."""

from collections.abc import Mapping
from dataclasses import dataclass

from formsconnector.exceptions import ConfigurationIncompleteError

DEFAULT_EMAIL_FIELD = "email"
DEFAULT_FIRST_NAME_FIELD = "first_name"
DEFAULT_LAST_NAME_FIELD = "last_name"


@dataclass(frozen=True)
class FieldMapping:
    """Link between a form field and an ActiveCampaign custom field id."""

    form_field: str
    activecampaign_field: str


def parse_tags(tags) -> tuple[str, ...]:
    """Split a comma-separated tag string, dropping blank entries."""
    if not tags:
        return ()
    return tuple(tag for tag in (token.strip() for token in str(tags).split(",")) if tag)


def parse_field_mapping(rows) -> tuple[FieldMapping, ...]:
    """Keep the mapping rows having both a form field and a custom field id."""
    if not isinstance(rows, list | tuple):
        return ()
    mappings = []
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        form_field = row.get("form_field") or ""
        activecampaign_field = row.get("activecampaign_field") or ""
        if form_field and activecampaign_field:
            mappings.append(FieldMapping(str(form_field), str(activecampaign_field)))
    return tuple(mappings)


@dataclass(frozen=True)
class ActiveCampaignSettings:
    """
    Settings of the ActiveCampaign connector for one form.

    The host hands over a plain mapping per invocation; this object is the
    resolved, read-only view used by the connector. Optional field handles
    fall back to their default when missing or blank.
    """

    api_url: str
    api_key: str
    list_id: str
    email_field: str = DEFAULT_EMAIL_FIELD
    first_name_field: str = DEFAULT_FIRST_NAME_FIELD
    last_name_field: str = DEFAULT_LAST_NAME_FIELD
    tags: tuple[str, ...] = ()
    field_mapping: tuple[FieldMapping, ...] = ()

    @classmethod
    def from_config(cls, config: Mapping) -> "ActiveCampaignSettings":
        """
        Resolve the settings from a host configuration mapping.

        Raises:
            ConfigurationIncompleteError: If api_url, api_key or list_id is empty

        """
        api_url = str(config.get("api_url") or "").rstrip("/")
        api_key = config.get("api_key")
        list_id = config.get("list_id")

        missing = [
            name for name, value in (("api_url", api_url), ("api_key", api_key), ("list_id", list_id)) if not value
        ]
        if missing:
            raise ConfigurationIncompleteError(f"Missing required configuration: {', '.join(missing)}")

        return cls(
            api_url=api_url,
            api_key=str(api_key),
            list_id=list_id,
            email_field=config.get("email_field") or DEFAULT_EMAIL_FIELD,
            first_name_field=config.get("first_name_field") or DEFAULT_FIRST_NAME_FIELD,
            last_name_field=config.get("last_name_field") or DEFAULT_LAST_NAME_FIELD,
            tags=parse_tags(config.get("tags")),
            field_mapping=parse_field_mapping(config.get("field_mapping")),
        )

    @property
    def headers(self) -> dict:
        """Return the headers shared by every API call."""
        return {
            "Api-Token": self.api_key,
            "Content-Type": "application/json",
        }
