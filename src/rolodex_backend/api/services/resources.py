"""List and partial-update pipelines exposed to the API layer."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from rolodex_backend.api.models import UpdateEnvelope
from rolodex_backend.database import ResourceRepository
from rolodex_backend.resources import (
    NotFoundError,
    PageMeta,
    RecordLockRegistry,
    ResourceRecord,
    ResourceSerializer,
    ValidationError,
    apply_query,
    paginate,
    parse_query,
    populate,
    sanitize,
)
from rolodex_backend.shared import set_path

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from rolodex_backend.database import DatabaseService
    from rolodex_backend.resources import ResourceConfiguration, ResourceRegistry
    from rolodex_backend.settings import BackendSettings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ListResult:
    """Serialized page of records with its pagination metadata."""

    data: list[dict[str, Any]]
    page: PageMeta


class ResourceService:
    """Run the query and update pipelines against the record store."""

    def __init__(
        self,
        *,
        database: DatabaseService,
        registry: ResourceRegistry,
        settings: BackendSettings,
        locks: RecordLockRegistry | None = None,
    ) -> None:
        self._database = database
        self._registry = registry
        self._settings = settings
        self._locks = locks if locks is not None else RecordLockRegistry()

    def list_records(
        self,
        resource: str,
        params: Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> ListResult:
        """Parse, filter, search, sort, paginate, populate and serialize."""
        configuration = self._registry.get(resource)
        descriptor = parse_query(
            params,
            default_limit=self._settings.default_page_limit,
            max_limit=self._settings.max_page_limit,
        )
        logger.debug("Listing %s with %s", resource, descriptor)
        with self._database.session() as session:
            repository = ResourceRepository(session)
            records = [
                ResourceRecord.from_schema(row)
                for row in repository.list_all(configuration.collection)
            ]
            page = paginate(apply_query(records, descriptor, configuration), descriptor.page)
            items = self._populate(session, configuration, page.items)
        serializer = ResourceSerializer(configuration)
        data = [serializer.serialize(item.record_id, item.document) for item in items]
        return ListResult(data=data, page=page.meta)

    def get_record(self, resource: str, record_id: str) -> dict[str, Any]:
        """Return one populated, serialized record."""
        configuration = self._registry.get(resource)
        with self._database.session() as session:
            row = ResourceRepository(session).get_by_id(configuration.collection, record_id)
            if row is None:
                raise _record_not_found(resource, record_id)
            (item,) = self._populate(
                session, configuration, [ResourceRecord.from_schema(row)]
            )
        return ResourceSerializer(configuration).serialize(item.record_id, item.document)

    def update_record(
        self, resource: str, record_id: str, body: Any
    ) -> dict[str, Any]:
        """Validate, sanitize, translate, persist and re-serialize an update."""
        configuration = self._registry.get(resource)
        envelope = self._validate(body, record_id)
        serializer = ResourceSerializer(configuration)

        with self._locks.hold(configuration.collection, record_id):
            with self._database.session() as session:
                repository = ResourceRepository(session)
                row = repository.get_by_id(configuration.collection, record_id)
                if row is None:
                    raise _record_not_found(resource, record_id)

                attributes = sanitize(envelope.data.attributes, configuration)
                document = copy.deepcopy(row.document)
                for path, value in serializer.deserialize(attributes):
                    set_path(document, path, value)
                repository.save_document(row, document)
                logger.info(
                    "Updated %s/%s fields=%s",
                    resource,
                    record_id,
                    sorted(envelope.data.attributes),
                )
                (item,) = self._populate(
                    session, configuration, [ResourceRecord.from_schema(row)]
                )
        return serializer.serialize(item.record_id, item.document)

    def _validate(self, body: Any, record_id: str) -> UpdateEnvelope:
        try:
            envelope = UpdateEnvelope.model_validate(body)
        except PydanticValidationError as exc:
            msg = "Update body must contain data.id and data.attributes"
            errors = exc.errors(
                include_url=False, include_context=False, include_input=False
            )
            raise ValidationError(msg, {"errors": errors}) from exc
        if envelope.data.id_ != record_id:
            msg = "data.id does not match the record addressed by the URL"
            raise ValidationError(msg, {"id": envelope.data.id_, "url_id": record_id})
        return envelope

    def _populate(
        self,
        session: Session,
        configuration: ResourceConfiguration,
        records: list[ResourceRecord],
    ) -> list[ResourceRecord]:
        repository = ResourceRepository(session)

        def lookup(collection: str, ids: Iterable[str]) -> dict[str, ResourceRecord]:
            return {
                key: ResourceRecord.from_schema(row)
                for key, row in repository.get_many(collection, ids).items()
            }

        return populate(records, configuration, self._registry, lookup)


def _record_not_found(resource: str, record_id: str) -> NotFoundError:
    msg = f"No {resource} record with id '{record_id}'"
    return NotFoundError(msg, {"resource": resource, "id": record_id})


__all__ = ["ListResult", "ResourceService"]
