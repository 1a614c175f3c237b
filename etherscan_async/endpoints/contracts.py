from collections.abc import Sequence

from etherscan_async.params import AddressQuery, ContractAddressesQuery, join_addresses

MODULE = "contract"


class ContractsAPI:
    async def get_contract_abi(self, address: str) -> str:
        """ABI of a verified contract, as a JSON string."""
        return await self.execute(MODULE, "getabi", AddressQuery(address=address))

    async def get_contract_source_code(self, address: str) -> str:
        return await self.execute(MODULE, "getsourcecode", AddressQuery(address=address))

    async def get_contract_creation(self, contract_addresses: Sequence[str]) -> str:
        """Creator address and creation transaction for up to 5 contracts."""
        params = ContractAddressesQuery(contractaddresses=join_addresses(contract_addresses))
        return await self.execute(MODULE, "getcontractcreation", params)
