from typing import Literal

from etherscan_async.params import ChainSizeQuery, DateRangeQuery, SortOrder

MODULE = "stats"


class StatsAPI:
    """Chain-wide supply, price, node and daily network statistics."""

    async def get_total_eth_supply(self) -> str:
        return await self.execute(MODULE, "ethsupply")

    async def get_total_eth2_supply(self) -> str:
        """Ether supply including staking rewards, burnt fees and withdrawals."""
        return await self.execute(MODULE, "ethsupply2")

    async def get_eth_price(self) -> str:
        return await self.execute(MODULE, "ethprice")

    async def get_chain_size(
        self,
        start_date: str,
        end_date: str,
        client_type: Literal["geth", "parity"] = "geth",
        sync_mode: Literal["default", "archive"] = "default",
        sort: SortOrder = "asc",
    ) -> str:
        params = ChainSizeQuery(
            startdate=start_date,
            enddate=end_date,
            clienttype=client_type,
            syncmode=sync_mode,
            sort=sort,
        )
        return await self.execute(MODULE, "chainsize", params)

    async def get_total_node_count(self) -> str:
        return await self.execute(MODULE, "nodecount")

    async def _daily_stat(self, action: str, start_date: str, end_date: str, sort: SortOrder) -> str:
        params = DateRangeQuery(startdate=start_date, enddate=end_date, sort=sort)
        return await self.execute(MODULE, action, params)

    async def get_daily_transaction_fee(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_stat("dailytxnfee", start_date, end_date, sort)

    async def get_daily_new_address_count(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_stat("dailynewaddress", start_date, end_date, sort)

    async def get_daily_network_utilization(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_stat("dailynetutilization", start_date, end_date, sort)

    async def get_daily_average_hash_rate(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_stat("dailyavghashrate", start_date, end_date, sort)

    async def get_daily_transaction_count(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_stat("dailytx", start_date, end_date, sort)

    async def get_daily_average_difficulty(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_stat("dailyavgnetdifficulty", start_date, end_date, sort)

    async def get_daily_market_cap_history(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_stat("ethdailymarketcap", start_date, end_date, sort)

    async def get_daily_eth_price_history(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        return await self._daily_stat("ethdailyprice", start_date, end_date, sort)
