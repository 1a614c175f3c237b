from etherscan_async.params import (
    AddressPaginatedQuery,
    ContractAddressPaginatedQuery,
    ContractAddressQuery,
    ContractBlockNumberQuery,
    ContractByAddressBlockNumberQuery,
    ContractByAddressPaginatedQuery,
    ContractByAddressQuery,
)

# Token data is spread over several remote modules
ACCOUNT_MODULE = "account"
STATS_MODULE = "stats"
TOKEN_MODULE = "token"


class TokensAPI:
    """ERC-20 supply and balances, holder lists and NFT inventories."""

    async def get_token_total_supply(self, contract_address: str) -> str:
        params = ContractAddressQuery(contractaddress=contract_address)
        return await self.execute(STATS_MODULE, "tokensupply", params)

    async def get_token_balance(self, contract_address: str, address: str, tag: str = "latest") -> str:
        params = ContractByAddressQuery(address=address, contractaddress=contract_address, tag=tag)
        return await self.execute(ACCOUNT_MODULE, "tokenbalance", params)

    async def get_token_supply_history(self, contract_address: str, blockno: int) -> str:
        """Total supply of a token as of a given block."""
        params = ContractBlockNumberQuery(contractaddress=contract_address, blockno=blockno)
        return await self.execute(STATS_MODULE, "tokensupplyhistory", params)

    async def get_token_balance_history(self, contract_address: str, address: str, blockno: int) -> str:
        """Token balance of an address as of a given block."""
        params = ContractByAddressBlockNumberQuery(address=address, contractaddress=contract_address, blockno=blockno)
        return await self.execute(ACCOUNT_MODULE, "tokenbalancehistory", params)

    async def get_token_holder_list(self, contract_address: str, page: int = 1, offset: int = 10) -> str:
        params = ContractAddressPaginatedQuery(contractaddress=contract_address, page=page, offset=offset)
        return await self.execute(TOKEN_MODULE, "tokenholderlist", params)

    async def get_token_info(self, contract_address: str) -> str:
        params = ContractAddressQuery(contractaddress=contract_address)
        return await self.execute(TOKEN_MODULE, "tokeninfo", params)

    async def get_address_erc20_holdings(self, address: str, page: int = 1, offset: int = 100) -> str:
        """Every ERC-20 token held by an address, with balances."""
        params = AddressPaginatedQuery(address=address, page=page, offset=offset)
        return await self.execute(ACCOUNT_MODULE, "addresstokenbalance", params)

    async def get_address_erc721_inventory(self, address: str, page: int = 1, offset: int = 100) -> str:
        """ERC-721 collections held by an address, with token counts."""
        params = AddressPaginatedQuery(address=address, page=page, offset=offset)
        return await self.execute(ACCOUNT_MODULE, "addresstokennftbalance", params)

    async def get_address_erc721_inventory_by_contract(
        self, contract_address: str, address: str, page: int = 1, offset: int = 100
    ) -> str:
        """Token IDs of one ERC-721 collection held by an address."""
        params = ContractByAddressPaginatedQuery(
            address=address,
            contractaddress=contract_address,
            page=page,
            offset=offset,
        )
        return await self.execute(ACCOUNT_MODULE, "addresstokennftinventory", params)
