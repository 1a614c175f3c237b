"""Tests for query parameter encoding."""

import pytest
from pydantic import ValidationError

from etherscan_async.errors import TopicChainError
from etherscan_async.params import (
    BASE_FIELDS,
    BlockTagBoolQuery,
    ContractByAddressBlockNumberQuery,
    ContractByAddressPaginatedQuery,
    ContractByAddressQuery,
    EmptyQuery,
    EstimateGasQuery,
    EventLogAddressTopicQuery,
    EventLogTopicQuery,
    QueryParams,
    TokenEventsQuery,
    TopicChain,
    TxListQuery,
    join_addresses,
    to_hex,
    topic_chain,
)

T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
T1 = "0x0000000000000000000000005e32f19a4c67ab81b67ab5b7ab5d9ff9ad4c7c0a"
T2 = "0x000000000000000000000000c45a4b3b698f21f88687548e7f5a80df8b99d93d"
T3 = "0x0000000000000000000000000000000000000000000000000000000000000001"


def _all_query_models(cls=QueryParams):
    for sub in cls.__subclasses__():
        yield sub
        yield from _all_query_models(sub)


def _log_query(chain: TopicChain) -> EventLogTopicQuery:
    return EventLogTopicQuery(fromblock=100, toblock=200, chain=chain, page=1, offset=1000)


def test_flat_query_keeps_declaration_order():
    query = TokenEventsQuery(
        address="0xabc",
        contractaddress="0xdef",
        page=2,
        offset=50,
        startblock=10,
        endblock=20,
        sort="desc",
    )

    assert query.to_query() == [
        ("address", "0xabc"),
        ("contractaddress", "0xdef"),
        ("page", "2"),
        ("offset", "50"),
        ("startblock", "10"),
        ("endblock", "20"),
        ("sort", "desc"),
    ]


def test_flat_query_is_deterministic():
    query = TxListQuery(address="0xabc", startblock=0, endblock=99999999, page=1, offset=10, sort="asc")
    assert query.to_query() == query.to_query()


def test_contract_by_address_records_put_address_first():
    records = [
        ContractByAddressQuery(address="0xabc", contractaddress="0xdef"),
        ContractByAddressPaginatedQuery(address="0xabc", contractaddress="0xdef", page=1, offset=10),
        ContractByAddressBlockNumberQuery(address="0xabc", contractaddress="0xdef", blockno=1),
    ]
    assert [[key for key, _ in record.to_query()] for record in records] == [
        ["address", "contractaddress", "tag"],
        ["address", "contractaddress", "page", "offset"],
        ["address", "contractaddress", "blockno"],
    ]


def test_bool_renders_lowercase():
    query = BlockTagBoolQuery(tag="0x10d4f", boolean=True)
    assert query.to_query() == [("tag", "0x10d4f"), ("boolean", "true")]
    assert BlockTagBoolQuery(tag="0x1", boolean=False).to_query()[1] == ("boolean", "false")


def test_estimate_gas_uses_wire_alias():
    query = EstimateGasQuery(data="0x4e71d92d", to="0xabc", value="0xff22", gas="0xffffff", gas_price="0x51da038cc")
    keys = [key for key, _ in query.to_query()]
    assert keys == ["data", "to", "value", "gas", "gasPrice"]


def test_empty_query_renders_nothing():
    assert EmptyQuery().to_query() == []


def test_records_are_frozen():
    query = TxListQuery(address="0xabc", startblock=0, endblock=1, page=1, offset=10, sort="asc")
    with pytest.raises(ValidationError):
        query.page = 3


def test_records_reject_wrong_types():
    with pytest.raises(ValidationError):
        TxListQuery(address="0xabc", startblock="0", endblock=1, page=1, offset=10, sort="asc")
    with pytest.raises(ValidationError):
        TxListQuery(address="0xabc", startblock=0, endblock=1, page=1, offset=10, sort="up")


def test_single_topic_encodes_five_elements():
    pairs = _log_query(TopicChain.from_slots(T0)).to_query()

    assert pairs == [
        ("fromblock", "100"),
        ("toblock", "200"),
        ("topic0", T0),
        ("page", "1"),
        ("offset", "1000"),
    ]


def test_two_topics_encode_operator_after_second_topic():
    pairs = _log_query(TopicChain.from_slots(T0, T1, topic0_1_opr="or")).to_query()

    assert len(pairs) == 7
    assert pairs[2:5] == [("topic0", T0), ("topic1", T1), ("topic0_1_opr", "or")]


def test_three_topics_encode_nine_elements():
    pairs = _log_query(TopicChain.from_slots(T0, T1, T2)).to_query()

    assert len(pairs) == 9
    assert [key for key, _ in pairs] == [
        "fromblock",
        "toblock",
        "topic0",
        "topic1",
        "topic0_1_opr",
        "topic2",
        "topic1_2_opr",
        "page",
        "offset",
    ]


def test_four_topics_encode_every_operator():
    chain = TopicChain.from_slots(T0, T1, T2, T3, topic0_1_opr="and", topic1_2_opr="or", topic2_3_opr="and")
    pairs = _log_query(chain).to_query()

    assert len(pairs) == 11
    assert pairs[-4:] == [("topic3", T3), ("topic2_3_opr", "and"), ("page", "1"), ("offset", "1000")]
    assert ("topic1_2_opr", "or") in pairs


def test_address_topic_query_puts_address_first():
    query = EventLogAddressTopicQuery(
        address="0xabc", fromblock=1, toblock=2, chain=topic_chain([T0]), page=1, offset=10
    )
    assert query.to_query()[0] == ("address", "0xabc")
    assert len(query.to_query()) == 6


def test_from_slots_rejects_gap():
    with pytest.raises(TopicChainError) as exc:
        TopicChain.from_slots(T0, "", T2)
    assert "topic2" in str(exc.value)
    assert "topic1" in str(exc.value)


def test_from_slots_rejects_missing_topic0():
    with pytest.raises(TopicChainError):
        TopicChain.from_slots("", T1)


def test_topic_chain_error_is_value_error():
    with pytest.raises(ValueError):
        TopicChain.from_slots(T0, "", "", T3)


def test_chain_requires_matching_operator_count():
    with pytest.raises(ValidationError):
        TopicChain(topics=(T0, T1), operators=())
    with pytest.raises(ValidationError):
        TopicChain(topics=(T0,), operators=("and",))


def test_chain_rejects_bad_sizes_and_operators():
    with pytest.raises(ValidationError):
        TopicChain(topics=(), operators=())
    with pytest.raises(ValidationError):
        TopicChain(topics=(T0, T1, T2, T3, T0), operators=("and",) * 4)
    with pytest.raises(ValidationError):
        TopicChain(topics=(T0, T1), operators=("xor",))
    with pytest.raises(ValidationError):
        TopicChain(topics=(T0, ""), operators=("and",))


def test_topic_chain_helper_defaults_to_and():
    chain = topic_chain([T0, T1, T2])
    assert chain.operators == ("and", "and")


@pytest.mark.parametrize("value,expected", [(255, "0xff"), (0, "0x0"), (1, "0x1"), (16, "0x10")])
def test_to_hex(value, expected):
    assert to_hex(value) == expected


def test_to_hex_rejects_negative():
    with pytest.raises(ValueError):
        to_hex(-1)


def test_join_addresses():
    assert join_addresses(["0xA", "0xB", "0xC"]) == "0xA,0xB,0xC"
    assert join_addresses(["0xA"]) == "0xA"
    with pytest.raises(ValueError):
        join_addresses([])


def test_no_record_uses_base_field_names():
    models = list(_all_query_models())
    assert len(models) > 20
    for model in models:
        assert not set(model.wire_names()) & set(BASE_FIELDS), model.__name__


def test_topic_query_declares_every_topic_key():
    names = EventLogTopicQuery.wire_names()
    for key in ("topic0", "topic3", "topic0_1_opr", "topic1_2_opr", "topic2_3_opr"):
        assert key in names


def test_reserved_key_is_rejected_at_class_definition():
    with pytest.raises(TypeError):

        class BadQuery(QueryParams):
            module: str
