from collections.abc import Sequence

from etherscan_async.params import (
    EventLogAddressQuery,
    EventLogAddressTopicQuery,
    EventLogTopicQuery,
    TopicChain,
    TopicOperator,
    topic_chain,
)

MODULE = "logs"
ACTION = "getLogs"


def _as_chain(topics: TopicChain | Sequence[str], operators: Sequence[TopicOperator] | None) -> TopicChain:
    if isinstance(topics, TopicChain):
        return topics
    return topic_chain(topics, operators)


class LogsAPI:
    """Event log queries filtered by emitting address and/or indexed topics."""

    async def get_logs_by_address(
        self, address: str, from_block: int, to_block: int, page: int = 1, offset: int = 1000
    ) -> str:
        params = EventLogAddressQuery(
            address=address,
            fromblock=from_block,
            toblock=to_block,
            page=page,
            offset=offset,
        )
        return await self.execute(MODULE, ACTION, params)

    async def get_logs_by_topics(
        self,
        topics: TopicChain | Sequence[str],
        from_block: int,
        to_block: int,
        operators: Sequence[TopicOperator] | None = None,
        page: int = 1,
        offset: int = 1000,
    ) -> str:
        """
        Event logs matching a chain of indexed topics.

        Args:
            topics: A TopicChain, or the present topics in order (topic0 first).
            from_block: First block of the range.
            to_block: Last block of the range.
            operators: Operators joining adjacent topics; defaults to "and" throughout.
                Ignored when ``topics`` is already a TopicChain.
            page: Page number.
            offset: Records per page.
        """
        params = EventLogTopicQuery(
            fromblock=from_block,
            toblock=to_block,
            chain=_as_chain(topics, operators),
            page=page,
            offset=offset,
        )
        return await self.execute(MODULE, ACTION, params)

    async def get_logs_by_address_and_topics(
        self,
        address: str,
        topics: TopicChain | Sequence[str],
        from_block: int,
        to_block: int,
        operators: Sequence[TopicOperator] | None = None,
        page: int = 1,
        offset: int = 1000,
    ) -> str:
        """Event logs emitted by one address and matching a chain of topics."""
        params = EventLogAddressTopicQuery(
            address=address,
            fromblock=from_block,
            toblock=to_block,
            chain=_as_chain(topics, operators),
            page=page,
            offset=offset,
        )
        return await self.execute(MODULE, ACTION, params)
