from collections.abc import Sequence
from typing import Literal

from etherscan_async.params import (
    AddressBlockNumberQuery,
    AddressBlockRangeQuery,
    AddressTagQuery,
    BlockRangeQuery,
    MinedBlocksQuery,
    SortOrder,
    TokenEventsQuery,
    TxHashQuery,
    TxListQuery,
    join_addresses,
)

MODULE = "account"

# Widest block range accepted by the account endpoints
DEFAULT_END_BLOCK = 99999999


class AccountsAPI:
    """Balances, transaction lists and transfer events for addresses."""

    async def get_balance(self, address: str, tag: str = "latest") -> str:
        """Ether balance of a single address, in wei."""
        return await self.execute(MODULE, "balance", AddressTagQuery(address=address, tag=tag))

    async def get_balance_multi(self, addresses: Sequence[str], tag: str = "latest") -> str:
        """Ether balances of several addresses in one call."""
        params = AddressTagQuery(address=join_addresses(addresses), tag=tag)
        return await self.execute(MODULE, "balancemulti", params)

    async def get_tx_list(
        self,
        address: str,
        start_block: int = 0,
        end_block: int = DEFAULT_END_BLOCK,
        page: int = 1,
        offset: int = 10,
        sort: SortOrder = "asc",
    ) -> str:
        params = TxListQuery(
            address=address,
            startblock=start_block,
            endblock=end_block,
            page=page,
            offset=offset,
            sort=sort,
        )
        return await self.execute(MODULE, "txlist", params)

    async def get_tx_list_internal(
        self,
        address: str,
        start_block: int = 0,
        end_block: int = DEFAULT_END_BLOCK,
        page: int = 1,
        offset: int = 10,
        sort: SortOrder = "asc",
    ) -> str:
        params = TxListQuery(
            address=address,
            startblock=start_block,
            endblock=end_block,
            page=page,
            offset=offset,
            sort=sort,
        )
        return await self.execute(MODULE, "txlistinternal", params)

    async def get_tx_list_internal_by_hash(self, tx_hash: str) -> str:
        return await self.execute(MODULE, "txlistinternal", TxHashQuery(txhash=tx_hash))

    async def get_tx_list_internal_by_block_range(
        self,
        start_block: int,
        end_block: int,
        page: int = 1,
        offset: int = 10,
        sort: SortOrder = "asc",
    ) -> str:
        params = BlockRangeQuery(
            startblock=start_block,
            endblock=end_block,
            page=page,
            offset=offset,
            sort=sort,
        )
        return await self.execute(MODULE, "txlistinternal", params)

    async def _token_events(
        self,
        action: str,
        address: str,
        contract_address: str,
        start_block: int,
        end_block: int,
        page: int,
        offset: int,
        sort: SortOrder,
    ) -> str:
        params = TokenEventsQuery(
            address=address,
            contractaddress=contract_address,
            page=page,
            offset=offset,
            startblock=start_block,
            endblock=end_block,
            sort=sort,
        )
        return await self.execute(MODULE, action, params)

    async def get_erc20_transfer_events(
        self,
        address: str,
        contract_address: str,
        start_block: int = 0,
        end_block: int = DEFAULT_END_BLOCK,
        page: int = 1,
        offset: int = 10,
        sort: SortOrder = "asc",
    ) -> str:
        """ERC-20 transfers of one token to or from an address."""
        return await self._token_events(
            "tokentx", address, contract_address, start_block, end_block, page, offset, sort
        )

    async def get_erc721_transfer_events(
        self,
        address: str,
        contract_address: str,
        start_block: int = 0,
        end_block: int = DEFAULT_END_BLOCK,
        page: int = 1,
        offset: int = 10,
        sort: SortOrder = "asc",
    ) -> str:
        """ERC-721 transfers of one collection to or from an address."""
        return await self._token_events(
            "tokennfttx", address, contract_address, start_block, end_block, page, offset, sort
        )

    async def get_erc1155_transfer_events(
        self,
        address: str,
        contract_address: str,
        start_block: int = 0,
        end_block: int = DEFAULT_END_BLOCK,
        page: int = 1,
        offset: int = 10,
        sort: SortOrder = "asc",
    ) -> str:
        """ERC-1155 transfers of one contract to or from an address."""
        return await self._token_events(
            "token1155tx", address, contract_address, start_block, end_block, page, offset, sort
        )

    async def get_mined_blocks(
        self,
        address: str,
        blocktype: Literal["blocks", "uncles"] = "blocks",
        page: int = 1,
        offset: int = 10,
        sort: SortOrder = "asc",
    ) -> str:
        params = MinedBlocksQuery(address=address, blocktype=blocktype, page=page, offset=offset, sort=sort)
        return await self.execute(MODULE, "getminedblocks", params)

    async def get_beacon_withdrawals(
        self,
        address: str,
        start_block: int = 0,
        end_block: int = DEFAULT_END_BLOCK,
        page: int = 1,
        offset: int = 10,
        sort: SortOrder = "asc",
    ) -> str:
        """Beacon chain withdrawals credited to an address."""
        params = AddressBlockRangeQuery(
            address=address,
            startblock=start_block,
            endblock=end_block,
            page=page,
            offset=offset,
            sort=sort,
        )
        return await self.execute(MODULE, "txsBeaconWithdrawal", params)

    async def get_balance_history(self, address: str, blockno: int) -> str:
        """Ether balance of an address as of a given block."""
        params = AddressBlockNumberQuery(address=address, blockno=blockno)
        return await self.execute(MODULE, "balancehistory", params)
