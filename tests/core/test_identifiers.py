"""Identifier Codec — only the 24-hex-character form parses."""

import pytest
from bson import ObjectId

from customer_api.core.errors import InvalidIdentifierError
from customer_api.core.identifiers import ObjectIdCodec, parse_object_id


@pytest.mark.parametrize("raw", [
    "65a1f0c2e4b0a1b2c3d4e5f6",
    "000000000000000000000000",
    "ABCDEFabcdef0123456789AB",
])
def test_valid_hex_ids_parse(raw):
    assert parse_object_id(raw) == ObjectId(raw)


def test_generated_ids_round_trip():
    oid = ObjectId()
    codec = ObjectIdCodec()
    assert codec.parse(codec.format(oid)) == oid


def test_format_is_lowercase_hex():
    assert ObjectIdCodec().format(parse_object_id("ABCDEFABCDEFABCDEFABCDEF")) == (
        "abcdefabcdefabcdefabcdef"
    )


@pytest.mark.parametrize("raw", [
    "",
    "65a1f0c2e4b0a1b2c3d4e5f",     # 23 chars
    "65a1f0c2e4b0a1b2c3d4e5f60",   # 25 chars
    "65a1f0c2e4b0a1b2c3d4e5fg",    # non-hex
    "zzzzzzzzzzzz",                # 12 chars (valid ObjectId bytes length)
    " 65a1f0c2e4b0a1b2c3d4e5f6",
    "65a1f0c2e4b0a1b2c3d4e5f6\n",
])
def test_malformed_ids_raise_invalid_identifier(raw):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        parse_object_id(raw)
    assert exc_info.value.description == "Invalid _id format."
    assert exc_info.value.http_status == 400


def test_non_string_input_is_rejected():
    with pytest.raises(InvalidIdentifierError):
        parse_object_id(ObjectId())
