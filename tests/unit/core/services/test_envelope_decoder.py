from __future__ import annotations

import pytest

from gqltransport.core.domain.graphql_request import RequestEnvelope
from gqltransport.core.domain.outcomes import DecodeFailed
from gqltransport.core.services.envelope_decoder import decode_envelope


def test_decodes_full_envelope() -> None:
    result = decode_envelope(
        b'{"query": "query Q { me { name } }", "operationName": "Q",'
        b' "variables": {"id": 1, "tags": ["a"]}, "extensions": {"x": true}}'
    )
    assert isinstance(result, RequestEnvelope)
    assert result.query == "query Q { me { name } }"
    assert result.operation_name == "Q"
    assert result.variables == {"id": 1, "tags": ["a"]}
    assert result.extensions == {"x": True}


def test_optional_members_default_to_empty() -> None:
    result = decode_envelope(b'{"query": "{ me { name } }"}')
    assert isinstance(result, RequestEnvelope)
    assert result.operation_name is None
    assert result.variables == {}
    assert result.extensions == {}


def test_null_members_are_treated_as_absent() -> None:
    result = decode_envelope(
        b'{"query": "{ me { name } }", "operationName": null, "variables": null}'
    )
    assert isinstance(result, RequestEnvelope)
    assert result.operation_name is None
    assert result.variables == {}


def test_empty_operation_name_is_treated_as_absent() -> None:
    result = decode_envelope(b'{"query": "{ me { name } }", "operationName": ""}')
    assert isinstance(result, RequestEnvelope)
    assert result.operation_name is None


def test_unknown_members_are_ignored() -> None:
    result = decode_envelope(b'{"query": "{ me { name } }", "id": "persisted"}')
    assert isinstance(result, RequestEnvelope)


def test_invalid_json_keeps_decoder_message() -> None:
    assert decode_envelope(b"notjson") == DecodeFailed(
        detail="Expecting value: line 1 column 1 (char 0)"
    )


def test_empty_body() -> None:
    assert decode_envelope(b"") == DecodeFailed(
        detail="Expecting value: line 1 column 1 (char 0)"
    )


def test_invalid_utf8_body() -> None:
    result = decode_envelope(b'{"query": "\xff"}')
    assert isinstance(result, DecodeFailed)


def test_non_object_body() -> None:
    result = decode_envelope(b'["{ me { name } }"]')
    assert isinstance(result, DecodeFailed)
    assert "valid dictionary" in result.detail


def test_empty_query() -> None:
    result = decode_envelope(b'{"query": ""}')
    assert isinstance(result, DecodeFailed)
    assert result.detail.startswith("query: ")


def test_variables_of_wrong_type() -> None:
    result = decode_envelope(b'{"query": "{ me { name } }", "variables": [1]}')
    assert isinstance(result, DecodeFailed)
    assert result.detail.startswith("variables: ")


def test_operation_name_of_wrong_type() -> None:
    result = decode_envelope(b'{"query": "{ me { name } }", "operationName": 3}')
    assert result == DecodeFailed(detail="operationName: Input should be a valid string")


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_standard_constants_are_rejected(constant: str) -> None:
    body = '{"query": "{ me { name } }", "variables": {"id": %s}}' % constant
    result = decode_envelope(body.encode())
    assert result == DecodeFailed(detail=f"invalid JSON constant {constant!r}")


def test_lone_surrogate_escape_is_accepted() -> None:
    result = decode_envelope(b'{"query": "{ me { name } }", "variables": {"s": "\\ud800"}}')
    assert isinstance(result, RequestEnvelope)
    assert result.variables == {"s": "\ud800"}
