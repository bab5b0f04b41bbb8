"""Normalization of raw book records into canonical graph nodes."""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode, RejectedRecord

_datetime_adapter = TypeAdapter(datetime)


class AttributeNormalizer:
    """Cleans raw book records into BookNode objects, dropping only unusable records."""

    def normalize_records(self, records: Any) -> tuple[list[BookNode], list[RejectedRecord]]:
        """Normalize an ordered list of raw records.

        Args:
            records: List of raw record mappings; None or a non-list is treated as empty

        Returns:
            Tuple of (nodes in input order, rejected records)
        """
        if not isinstance(records, (list, tuple)):
            if records is not None:
                logger.warning(f"Expected a list of records, got {type(records).__name__}")
            return [], []

        nodes = []
        rejected = []
        seen_ids = set()

        for index, record in enumerate(records):
            node, reason = self._normalize_single_record(record)
            if node is not None and node.id in seen_ids:
                node, reason = None, f"duplicate id '{node.id}'"

            if node is None:
                logger.warning(f"Dropping book record {index}: {reason}")
                rejected.append(RejectedRecord(index=index, reason=reason))
                continue

            seen_ids.add(node.id)
            nodes.append(node)

        return nodes, rejected

    def _normalize_single_record(self, record: Any) -> tuple[BookNode | None, str]:
        """Normalize one record, returning the node or the rejection reason."""
        if not isinstance(record, Mapping):
            return None, f"record is {type(record).__name__}, not a mapping"

        node_id = self._resolve_id(record.get("id"))
        if node_id is None:
            return None, "missing or unusable id"

        node = BookNode(
            id=node_id,
            title=self._clean_text(record.get("title")),
            author=self._clean_text(record.get("author")) or settings.unknown_author,
            tags=self._clean_tags(record.get("tags")),
            publication_year=self._parse_year(
                _first_present(record, "publicationYear", "publication_year")
            ),
            created_at=self._parse_timestamp(_first_present(record, "createdAt", "created_at")),
            notes=self._clean_text(record.get("notes")),
        )
        return node, ""

    @staticmethod
    def _resolve_id(value: Any) -> str | None:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            return None
        node_id = str(value).strip()
        return node_id or None

    @staticmethod
    def _clean_text(value: Any) -> str:
        return value.strip() if isinstance(value, str) else ""

    @staticmethod
    def _clean_tags(value: Any) -> list[str]:
        """Keep non-empty string tags, trimmed and deduplicated; anything else yields no tags."""
        if not isinstance(value, (list, tuple)):
            return []

        tags = []
        for tag in value:
            if not isinstance(tag, str):
                continue
            tag = tag.strip()
            if tag and tag not in tags:
                tags.append(tag)
        return tags

    @staticmethod
    def _parse_year(value: Any) -> int | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None

    @staticmethod
    def _parse_timestamp(value: Any) -> datetime | None:
        """Parse datetimes, ISO-8601 strings and epoch seconds; naive values are taken as UTC."""
        if value is None or isinstance(value, bool) or value == "":
            return None
        try:
            parsed = _datetime_adapter.validate_python(value)
        except ValidationError:
            logger.debug(f"Ignoring unparseable timestamp: {value!r}")
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed


def _first_present(record: Mapping, *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None
