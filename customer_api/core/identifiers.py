"""Identifier Codec — external string form ↔ storage identifier.

Invariants:
    - parse() accepts exactly 24 hex characters (either case), nothing else
    - parse() never touches storage; a failed parse raises InvalidIdentifierError
    - format(parse(s)) == s.lower() for every accepted s

Design Decisions:
    - IdentifierCodec Protocol with ObjectIdCodec as the MongoDB implementation
    - Explicit regex check before ObjectId(): ObjectId() also accepts 12-byte
      values and ObjectId instances, which are not a valid external form
"""

import re
from typing import Protocol, TypeVar

from bson import ObjectId
from bson.errors import InvalidId

from customer_api.core.errors import InvalidIdentifierError

Identifier = TypeVar("Identifier")

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


class IdentifierCodec(Protocol[Identifier]):
    """Contract for converting external ids to the storage identifier type."""
    def parse(self, raw: str) -> Identifier: ...
    def format(self, ident: Identifier) -> str: ...


class ObjectIdCodec:
    """MongoDB ObjectId codec."""

    def parse(self, raw: str) -> ObjectId:
        if not isinstance(raw, str) or not _OBJECT_ID_PATTERN.fullmatch(raw):
            raise InvalidIdentifierError(raw)
        try:
            return ObjectId(raw)
        except (InvalidId, TypeError):
            raise InvalidIdentifierError(raw)

    def format(self, ident: ObjectId) -> str:
        return str(ident)


object_id_codec = ObjectIdCodec()


def parse_object_id(raw: str) -> ObjectId:
    """Parse an external id with the default ObjectId codec."""
    return object_id_codec.parse(raw)
