"""Query parameter records for the Etherscan API.

Every record renders itself as an ordered list of ``(key, value)`` pairs via
:meth:`QueryParams.to_query`. Flat records emit every declared field in
declaration order; the event-log topic records emit a variable-length
sequence driven by :class:`TopicChain`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from etherscan_async.errors import TopicChainError

# Query keys owned by the dispatcher. No record may declare one of these.
BASE_FIELDS = ("module", "action", "apikey")

SortOrder = Literal["asc", "desc"]
TopicOperator = Literal["and", "or"]

MAX_TOPICS = 4


def to_hex(value: int) -> str:
    """Format a non-negative integer as a ``0x``-prefixed lowercase hex string."""
    if value < 0:
        raise ValueError(f"Cannot hex-encode negative value {value}")
    return f"0x{value:x}"


def join_addresses(addresses: Iterable[str]) -> str:
    """Join addresses into the comma-separated form used by multi-address queries."""
    items = list(addresses)
    if not items:
        raise ValueError("At least one address is required")
    return ",".join(items)


def _render(value: object) -> str:
    # bool is checked first since it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryParams(BaseModel):
    """Base class for endpoint parameter records."""

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs):
        super().__pydantic_init_subclass__(**kwargs)
        clash = set(cls.wire_names()) & set(BASE_FIELDS)
        if clash:
            raise TypeError(f"{cls.__name__} declares reserved query keys: {sorted(clash)}")

    @classmethod
    def wire_names(cls) -> tuple[str, ...]:
        """Every query key this record can emit."""
        return tuple(field.alias or name for name, field in cls.model_fields.items())

    def to_query(self) -> list[tuple[str, str]]:
        return [
            (field.alias or name, _render(getattr(self, name)))
            for name, field in type(self).model_fields.items()
        ]


class EmptyQuery(QueryParams):
    """Parameters for endpoints that take none."""


# Accounts


class AddressTagQuery(QueryParams):
    address: str
    tag: str = "latest"


class TxListQuery(QueryParams):
    address: str
    startblock: int
    endblock: int
    page: int
    offset: int
    sort: SortOrder


class TxHashQuery(QueryParams):
    txhash: str


class BlockRangeQuery(QueryParams):
    startblock: int
    endblock: int
    page: int
    offset: int
    sort: SortOrder


class TokenEventsQuery(QueryParams):
    address: str
    contractaddress: str
    page: int
    offset: int
    startblock: int
    endblock: int
    sort: SortOrder


class MinedBlocksQuery(QueryParams):
    address: str
    blocktype: Literal["blocks", "uncles"]
    page: int
    offset: int
    sort: SortOrder


class AddressBlockRangeQuery(QueryParams):
    address: str
    startblock: int
    endblock: int
    page: int
    offset: int
    sort: SortOrder


class AddressBlockNumberQuery(QueryParams):
    address: str
    blockno: int


# Contracts


class AddressQuery(QueryParams):
    address: str


class ContractAddressQuery(QueryParams):
    contractaddress: str


class ContractAddressesQuery(QueryParams):
    contractaddresses: str


# Blocks


class BlockNumberQuery(QueryParams):
    blockno: int


class BlockTimestampQuery(QueryParams):
    timestamp: int
    closest: Literal["before", "after"]


class DateRangeQuery(QueryParams):
    """Daily statistics window; dates are ``yyyy-MM-dd``."""

    startdate: str
    enddate: str
    sort: SortOrder


# Logs


class EventLogAddressQuery(QueryParams):
    address: str
    fromblock: int
    toblock: int
    page: int
    offset: int


class TopicChain(BaseModel):
    """An ordered run of 1 to 4 log topics joined by boolean operators.

    ``operators[i]`` joins ``topics[i]`` and ``topics[i + 1]``, so a chain
    always carries exactly one operator fewer than it has topics. A chain
    with a gap (a later topic without an earlier one) cannot be built.
    """

    model_config = ConfigDict(frozen=True)

    topics: tuple[str, ...] = Field(..., min_length=1, max_length=MAX_TOPICS)
    operators: tuple[TopicOperator, ...] = ()

    @model_validator(mode="after")
    def check_arity(self) -> TopicChain:
        if not all(self.topics):
            raise ValueError("Topics in a chain must be non-empty")
        if len(self.operators) != len(self.topics) - 1:
            raise ValueError(
                f"A chain of {len(self.topics)} topics needs {len(self.topics) - 1} operators, "
                f"got {len(self.operators)}"
            )
        return self

    @classmethod
    def from_slots(
        cls,
        topic0: str,
        topic1: str = "",
        topic2: str = "",
        topic3: str = "",
        topic0_1_opr: TopicOperator = "and",
        topic1_2_opr: TopicOperator = "and",
        topic2_3_opr: TopicOperator = "and",
    ) -> TopicChain:
        """Build a chain from the four-slot form, where empty strings mean "absent".

        Raises:
            TopicChainError: If topic0 is empty or a topic follows an empty slot.
        """
        slots = [topic0, topic1, topic2, topic3]
        operators = [topic0_1_opr, topic1_2_opr, topic2_3_opr]

        if not topic0:
            raise TopicChainError("topic0 is required")

        present = 1
        while present < MAX_TOPICS and slots[present]:
            present += 1

        stray = [f"topic{i}" for i in range(present, MAX_TOPICS) if slots[i]]
        if stray:
            raise TopicChainError(f"{', '.join(stray)} set without topic{present}")

        return cls(topics=tuple(slots[:present]), operators=tuple(operators[: present - 1]))

    def to_query(self) -> list[tuple[str, str]]:
        pairs = [("topic0", self.topics[0])]
        for i, (topic, operator) in enumerate(zip(self.topics[1:], self.operators, strict=True)):
            pairs.append((f"topic{i + 1}", topic))
            pairs.append((f"topic{i}_{i + 1}_opr", operator))
        return pairs


def _topic_wire_names() -> tuple[str, ...]:
    names = ["topic0"]
    for i in range(1, MAX_TOPICS):
        names += [f"topic{i}", f"topic{i - 1}_{i}_opr"]
    return tuple(names)


class EventLogTopicQuery(QueryParams):
    fromblock: int
    toblock: int
    chain: TopicChain
    page: int
    offset: int

    @classmethod
    def wire_names(cls) -> tuple[str, ...]:
        return ("fromblock", "toblock", *_topic_wire_names(), "page", "offset")

    def to_query(self) -> list[tuple[str, str]]:
        return [
            ("fromblock", str(self.fromblock)),
            ("toblock", str(self.toblock)),
            *self.chain.to_query(),
            ("page", str(self.page)),
            ("offset", str(self.offset)),
        ]


class EventLogAddressTopicQuery(EventLogTopicQuery):
    address: str

    @classmethod
    def wire_names(cls) -> tuple[str, ...]:
        return ("address", *super().wire_names())

    def to_query(self) -> list[tuple[str, str]]:
        return [("address", self.address), *super().to_query()]


# Geth/Parity proxy; block numbers and quantities are pre-formatted hex


class BlockTagBoolQuery(QueryParams):
    tag: str
    boolean: bool


class BlockTagIndexQuery(QueryParams):
    tag: str
    index: str


class RawTxQuery(QueryParams):
    hex: str


class CallQuery(QueryParams):
    to: str
    data: str
    tag: str = "latest"


class StoragePositionQuery(QueryParams):
    address: str
    position: str
    tag: str = "latest"


class EstimateGasQuery(QueryParams):
    data: str
    to: str
    value: str
    gas: str
    gas_price: str = Field(..., alias="gasPrice")


# Tokens


class ContractByAddressQuery(QueryParams):
    address: str
    contractaddress: str
    tag: str = "latest"


class ContractByAddressPaginatedQuery(QueryParams):
    address: str
    contractaddress: str
    page: int
    offset: int


class ContractBlockNumberQuery(QueryParams):
    contractaddress: str
    blockno: int


class ContractByAddressBlockNumberQuery(QueryParams):
    address: str
    contractaddress: str
    blockno: int


class ContractAddressPaginatedQuery(QueryParams):
    contractaddress: str
    page: int
    offset: int


class AddressPaginatedQuery(QueryParams):
    address: str
    page: int
    offset: int


# Gas tracker and stats


class GasPriceQuery(QueryParams):
    gasprice: str


class ChainSizeQuery(QueryParams):
    startdate: str
    enddate: str
    clienttype: Literal["geth", "parity"]
    syncmode: Literal["default", "archive"]
    sort: SortOrder


def topic_chain(topics: Sequence[str], operators: Sequence[TopicOperator] | None = None) -> TopicChain:
    """Build a chain from present topics, defaulting every operator to ``"and"``."""
    if operators is None:
        operators = ["and"] * max(len(topics) - 1, 0)
    return TopicChain(topics=tuple(topics), operators=tuple(operators))
