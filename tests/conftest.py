import struct

import pytest

from listserial import ListNode, ListSerializer, ListSerializerV2
from listserial.utils import reset_counts


@pytest.fixture(autouse=True)
def _reset_log_counts():
    reset_counts()
    yield
    reset_counts()


def i32(value):
    return struct.pack('<i', value)


def text(value):
    data = value.encode('utf-16-le')
    return i32(len(data)) + data


@pytest.fixture
def abc_list():
    """A("x") -> B(None) -> C("y"), A.random = C, C.random = A."""
    a = ListNode("x")
    b = a.append(None)
    c = b.append("y")
    a.random = c
    c.random = a
    return a, b, c


@pytest.fixture(
    params=["v1", "v2", "v2-concurrent"],
)
def serializer(request):
    if request.param == "v1":
        return ListSerializer()
    if request.param == "v2":
        return ListSerializerV2()
    return ListSerializerV2(concurrent_resolver=True)
