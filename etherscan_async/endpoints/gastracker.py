from etherscan_async.params import DateRangeQuery, GasPriceQuery, SortOrder

MODULE = "gastracker"
STATS_MODULE = "stats"


class GasTrackerAPI:
    async def estimate_confirmation_time(self, gas_price: int) -> str:
        """Estimated seconds to confirmation at a gas price given in wei."""
        return await self.execute(MODULE, "gasestimate", GasPriceQuery(gasprice=str(gas_price)))

    async def get_gas_oracle(self) -> str:
        """Current safe, proposed and fast gas prices."""
        return await self.execute(MODULE, "gasoracle")

    async def get_daily_average_gas_limit(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        params = DateRangeQuery(startdate=start_date, enddate=end_date, sort=sort)
        return await self.execute(STATS_MODULE, "dailyavggaslimit", params)

    async def get_daily_total_gas_used(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        params = DateRangeQuery(startdate=start_date, enddate=end_date, sort=sort)
        return await self.execute(STATS_MODULE, "dailygasused", params)

    async def get_daily_average_gas_price(self, start_date: str, end_date: str, sort: SortOrder = "asc") -> str:
        params = DateRangeQuery(startdate=start_date, enddate=end_date, sort=sort)
        return await self.execute(STATS_MODULE, "dailyavggasprice", params)
