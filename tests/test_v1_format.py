import io

import pytest

from conftest import i32, text
from listserial import (
    EmptyStreamError,
    InvalidArgumentError,
    ListNode,
    MalformedRecordError,
    StreamCorruptionError,
    TruncatedStreamError,
    UnresolvedReferenceError,
    build_list,
    iter_nodes,
    snapshot,
)
from listserial.graph import build_v1_list
from listserial.parsers import ListV1Parser
from listserial.serialization import ListV1Serializer
from listserial.utils import get_counts

NULL = i32(-1)


def decode(data):
    return build_v1_list(ListV1Parser(io.BytesIO(data)).get_records())


def test_wire_layout(abc_list):
    a, _, _ = abc_list
    # A gets id 0, its forward random target C gets id 1, B gets id 2
    expected = (
        i32(0) + text("x") + i32(1)
        + i32(2) + NULL + NULL
        + i32(1) + text("y") + i32(0)
    )
    assert ListV1Serializer(a).to_bytes() == expected


def test_serialize_returns_byte_count_and_does_not_mutate(abc_list):
    a, b, c = abc_list
    buffer = io.BytesIO()
    assert ListV1Serializer(a).serialize(buffer) == len(buffer.getvalue())

    assert (a.data, b.data, c.data) == ("x", None, "y")
    assert a.random is c and b.random is None and c.random is a
    assert a.next is b and b.next is c and c.previous is b


def test_serialize_discards_old_stream_contents():
    buffer = io.BytesIO(b'\xaa' * 200)
    ListV1Serializer(ListNode("a")).serialize(buffer)
    assert buffer.getvalue() == i32(0) + text("a") + NULL


def test_parser_records(abc_list):
    data = ListV1Serializer(abc_list[0]).to_bytes()
    records = ListV1Parser(io.BytesIO(data)).get_records()

    assert [(r.link_id, r.data, r.random_link_id) for r in records] == [
        (0, "x", 1),
        (2, None, None),
        (1, "y", 0),
    ]
    assert [r.offset for r in records] == [0, 14, 26]


def test_decode_scenario(abc_list):
    a, b, c = abc_list
    head = decode(ListV1Serializer(a).to_bytes())
    a2, b2, c2 = list(iter_nodes(head))

    assert (a2.data, b2.data, c2.data) == ("x", None, "y")
    assert a2.random is c2
    assert b2.random is None
    assert c2.random is a2
    assert a2 is not a and b2 is not b and c2 is not c
    assert a2.previous is None and b2.previous is a2 and c2.previous is b2 and c2.next is None


def test_forward_and_backward_links():
    data = [("first", 3), ("self", 1), ("back", 0), ("last", 2)]
    head = decode(ListV1Serializer(build_list(data)).to_bytes())
    assert snapshot(head) == data


def test_decode_accepts_arbitrary_link_ids():
    # Ids only need to be consistent within the stream
    data = (
        i32(10) + text("a") + i32(30)
        + i32(30) + text("b") + i32(10)
    )
    assert snapshot(decode(data)) == [("a", 1), ("b", 0)]


def test_duplicate_link_id_keeps_first_node():
    data = (
        i32(0) + NULL + NULL
        + i32(0) + text("dup") + i32(0)
    )
    head = decode(data)
    assert head.next.random is head
    assert get_counts() == (0, 1)


def test_unresolved_reference():
    data = i32(0) + text("a") + i32(5)
    with pytest.raises(UnresolvedReferenceError) as excinfo:
        decode(data)
    assert excinfo.value.offset == 0


def test_negative_link_id():
    with pytest.raises(MalformedRecordError):
        decode(i32(-2) + NULL + NULL)


def test_negative_random_link_id():
    with pytest.raises(MalformedRecordError):
        decode(i32(0) + NULL + i32(-7))


def test_empty_stream():
    with pytest.raises(EmptyStreamError):
        decode(b'')


def test_truncated_scenario_always_fails(abc_list):
    data = ListV1Serializer(abc_list[0]).to_bytes()
    for length in range(len(data)):
        with pytest.raises(StreamCorruptionError):
            decode(data[:length])


def test_truncated_inside_field():
    data = ListV1Serializer(build_list([("hello", 0)])).to_bytes()
    with pytest.raises(TruncatedStreamError):
        decode(data[:-2])
    with pytest.raises(TruncatedStreamError):
        decode(data[:7])


def test_random_target_outside_list():
    head = ListNode("a")
    head.random = ListNode("stranger")
    with pytest.raises(InvalidArgumentError):
        ListV1Serializer(head).to_bytes()


def test_rejects_missing_head():
    with pytest.raises(InvalidArgumentError):
        ListV1Serializer(None)
