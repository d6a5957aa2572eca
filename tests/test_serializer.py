import asyncio
import io
import random

import pytest

from listserial import (
    InvalidArgumentError,
    ListNode,
    ListSerializer,
    ListSerializerV2,
    StreamCorruptionError,
    build_list,
    deep_copy,
    deserialize,
    get_serializer,
    iter_nodes,
    serialize,
    snapshot,
)


def random_list_data(size, seed):
    rng = random.Random(seed)
    payloads = [None, "", "a", "hello world", "été", "\U0001F600"]
    return [
        (rng.choice(payloads), rng.choice([None, rng.randrange(size)]))
        for _ in range(size)
    ]


@pytest.mark.asyncio
async def test_round_trip_scenario(serializer, abc_list):
    a, b, c = abc_list
    stream = io.BytesIO()

    await serializer.serialize(a, stream)
    head = await serializer.deserialize(stream)
    a2, b2, c2 = list(iter_nodes(head))

    assert (a2.data, b2.data, c2.data) == ("x", None, "y")
    assert a2.random is c2
    assert b2.random is None
    assert c2.random is a2
    assert a2 is not a and b2 is not b and c2 is not c


@pytest.mark.asyncio
@pytest.mark.parametrize("data", [
    [(None, None)],
    [("only", 0)],
    [("", None), (None, None)],
    [("a", 1), ("b", 0)],
    [("a", 3), ("b", 2), ("c", 1), ("d", 0)],
])
async def test_round_trip_shapes(serializer, data):
    stream = io.BytesIO()
    await serializer.serialize(build_list(data), stream)
    assert snapshot(await serializer.deserialize(stream)) == data


@pytest.mark.asyncio
@pytest.mark.parametrize("seed", range(5))
async def test_round_trip_random_lists(serializer, seed):
    data = random_list_data(60, seed)
    copy = await serializer.deep_copy(build_list(data))
    assert snapshot(copy) == data


@pytest.mark.asyncio
async def test_deep_copy_shares_no_nodes(serializer):
    head = build_list(random_list_data(30, 42))
    copy = await serializer.deep_copy(head)

    originals = {id(node) for node in iter_nodes(head)}
    assert all(id(node) not in originals for node in iter_nodes(copy))
    assert snapshot(copy) == snapshot(head)


@pytest.mark.asyncio
async def test_repeated_deep_copy(serializer):
    head = build_list(random_list_data(25, 7))
    once = await serializer.deep_copy(head)
    twice = await serializer.deep_copy(once)

    assert snapshot(twice) == snapshot(once)
    assert twice is not once


def test_sync_api(serializer, abc_list):
    stream = io.BytesIO()
    byte_count = serializer.serialize_sync(abc_list[0], stream)

    assert byte_count == len(stream.getvalue())
    assert snapshot(serializer.deserialize_sync(stream)) == [("x", 2), (None, None), ("y", 0)]
    assert snapshot(serializer.deep_copy_sync(abc_list[0])) == [("x", 2), (None, None), ("y", 0)]


@pytest.mark.asyncio
async def test_invalid_arguments(serializer):
    with pytest.raises(InvalidArgumentError):
        await serializer.serialize(None, io.BytesIO())
    with pytest.raises(InvalidArgumentError):
        await serializer.deep_copy(None)
    with pytest.raises(InvalidArgumentError):
        serializer.deep_copy_sync(ListNode("a").append("b"))


@pytest.mark.asyncio
async def test_corruption_surfaces_from_await(serializer, abc_list):
    stream = io.BytesIO()
    await serializer.serialize(abc_list[0], stream)
    truncated = io.BytesIO(stream.getvalue()[:-1])

    with pytest.raises(StreamCorruptionError):
        await serializer.deserialize(truncated)


@pytest.mark.asyncio
async def test_concurrent_operations(serializer):
    datasets = [random_list_data(40, seed) for seed in range(8)]
    copies = await asyncio.gather(*(serializer.deep_copy(build_list(data)) for data in datasets))
    assert [snapshot(copy) for copy in copies] == datasets


@pytest.mark.asyncio
async def test_formats_are_not_interchangeable(abc_list):
    stream = io.BytesIO()
    await ListSerializerV2().serialize(abc_list[0], stream)
    with pytest.raises(StreamCorruptionError):
        await ListSerializer().deserialize(stream)


@pytest.mark.asyncio
@pytest.mark.parametrize("format_name", ["v1", "v2"])
async def test_module_level_functions(format_name, abc_list):
    stream = io.BytesIO()
    await serialize(abc_list[0], stream, format_name=format_name)
    head = await deserialize(stream, format_name=format_name)
    copy = await deep_copy(head, format_name=format_name)
    assert snapshot(copy) == [("x", 2), (None, None), ("y", 0)]


def test_get_serializer():
    assert isinstance(get_serializer(), ListSerializer)
    assert isinstance(get_serializer("v1"), ListSerializer)

    v2 = get_serializer("v2", concurrent_resolver=True)
    assert isinstance(v2, ListSerializerV2)
    assert v2.concurrent_resolver is True

    with pytest.raises(ValueError):
        get_serializer("v3")
