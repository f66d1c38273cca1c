from __future__ import annotations

import pytest

from gqltransport.core.domain.outcomes import (
    DecodeFailed,
    ErrorItem,
    ExecutionFailed,
    Location,
    Success,
    SyntaxFailed,
    TransportRejected,
    ValidationFailed,
    VariableFailed,
)
from gqltransport.core.services.response_encoder import (
    STATUS_BY_OUTCOME,
    dump_json,
    encode_body,
    encode_outcome,
)


@pytest.mark.parametrize(
    ("outcome", "status_code", "body"),
    [
        (Success(data=b'{"name":"test"}'), 200, b'{"data":{"name":"test"}}'),
        (
            TransportRejected(),
            400,
            b'{"errors":[{"message":"transport not supported"}],"data":null}',
        ),
        (
            DecodeFailed(detail="Expecting value: line 1 column 1 (char 0)"),
            400,
            b'{"errors":[{"message":"json body could not be decoded: '
            b'Expecting value: line 1 column 1 (char 0)"}],"data":null}',
        ),
        (
            SyntaxFailed(message="Unexpected !", locations=(Location(1, 1),)),
            422,
            b'{"errors":[{"message":"Unexpected !","locations":[{"line":1,"column":1}]}],'
            b'"data":null}',
        ),
        (
            ValidationFailed(
                errors=(
                    ErrorItem(
                        message='Cannot query field "title" on type "User".',
                        locations=(Location(1, 8),),
                    ),
                )
            ),
            422,
            b'{"errors":[{"message":"Cannot query field \\"title\\" on type \\"User\\".",'
            b'"locations":[{"line":1,"column":8}]}],"data":null}',
        ),
        (
            VariableFailed(message="cannot use bool as Int", path=("variable", "id")),
            422,
            b'{"errors":[{"message":"cannot use bool as Int","path":["variable","id"]}],'
            b'"data":null}',
        ),
        (
            ExecutionFailed(
                errors=(
                    ErrorItem(message="mutations are not supported"),
                    ErrorItem(message="second"),
                )
            ),
            200,
            b'{"errors":[{"message":"mutations are not supported"},{"message":"second"}],'
            b'"data":null}',
        ),
    ],
)
def test_encode_outcome(outcome, status_code: int, body: bytes) -> None:  # type: ignore[no-untyped-def]
    envelope = encode_outcome(outcome)
    assert envelope.status_code == status_code
    assert envelope.content == body
    assert envelope.headers == {"Content-Type": "application/json"}
    assert envelope.media_type == "application/json"


def test_every_outcome_type_has_a_status() -> None:
    assert set(STATUS_BY_OUTCOME) == {
        Success,
        TransportRejected,
        DecodeFailed,
        SyntaxFailed,
        ValidationFailed,
        VariableFailed,
        ExecutionFailed,
    }


def test_unknown_outcome_is_rejected() -> None:
    with pytest.raises(TypeError):
        encode_outcome(object())  # type: ignore[arg-type]


def test_success_with_partial_errors_lists_errors_first() -> None:
    outcome = Success(
        data=b'{"me":null}',
        errors=(ErrorItem(message="boom", path=("me", 0, "name")),),
    )
    assert encode_outcome(outcome).content == (
        b'{"errors":[{"message":"boom","path":["me",0,"name"]}],"data":{"me":null}}'
    )


def test_error_members_keep_their_order_and_skip_absent_ones() -> None:
    item = ErrorItem(
        message="m",
        locations=(Location(2, 3), Location(4, 5)),
        path=("a", 1),
        extensions={"code": "X"},
    )
    assert encode_body((item,), b"null") == (
        b'{"errors":[{"message":"m","locations":[{"line":2,"column":3},'
        b'{"line":4,"column":5}],"path":["a",1],"extensions":{"code":"X"}}],'
        b'"data":null}'
    )


def test_non_ascii_messages_are_written_as_utf8() -> None:
    body = encode_outcome(ExecutionFailed(errors=(ErrorItem(message="débâcle"),))).content
    assert body == '{"errors":[{"message":"débâcle"}],"data":null}'.encode()


def test_encoding_is_deterministic() -> None:
    outcome = ValidationFailed(errors=(ErrorItem(message="x", locations=(Location(1, 2),)),))
    assert encode_outcome(outcome) == encode_outcome(outcome)


def test_lone_surrogates_are_written_as_json_escapes() -> None:
    outcome = VariableFailed(
        message="\ud800 is not a valid Color", path=("variable", "c")
    )
    assert encode_outcome(outcome).content == (
        b'{"errors":[{"message":"\\ud800 is not a valid Color",'
        b'"path":["variable","c"]}],"data":null}'
    )
    assert dump_json({"s": "\udfff\u00e9"}) == b'{"s":"\\udfff\xc3\xa9"}'
