from typing import Literal

from etherscan_async.params import BlockNumberQuery, BlockTimestampQuery, DateRangeQuery, SortOrder

MODULE = "block"
STATS_MODULE = "stats"


class BlocksAPI:
    """Block rewards, timing and daily block statistics."""

    async def get_block_reward(self, blockno: int) -> str:
        return await self.execute(MODULE, "getblockreward", BlockNumberQuery(blockno=blockno))

    async def get_block_countdown(self, blockno: int) -> str:
        """Estimated time until a future block is mined."""
        return await self.execute(MODULE, "getblockcountdown", BlockNumberQuery(blockno=blockno))

    async def get_block_number_by_timestamp(
        self, timestamp: int, closest: Literal["before", "after"] = "before"
    ) -> str:
        """
        Block mined closest to a Unix timestamp.

        Args:
            timestamp: Unix timestamp in seconds.
            closest: Which side of the timestamp to search.
        """
        params = BlockTimestampQuery(timestamp=timestamp, closest=closest)
        return await self.execute(MODULE, "getblocknobytime", params)

    async def _daily_block_stat(self, action: str, start_date: str, end_date: str, sort: SortOrder) -> str:
        params = DateRangeQuery(startdate=start_date, enddate=end_date, sort=sort)
        return await self.execute(STATS_MODULE, action, params)

    async def get_daily_average_block_size(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_block_stat("dailyavgblocksize", start_date, end_date, sort)

    async def get_daily_block_count(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_block_stat("dailyblkcount", start_date, end_date, sort)

    async def get_daily_block_rewards(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_block_stat("dailyblockrewards", start_date, end_date, sort)

    async def get_daily_block_time(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_block_stat("dailyavgblocktime", start_date, end_date, sort)

    async def get_daily_uncle_block_count(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_block_stat("dailyuncleblkcount", start_date, end_date, sort)
