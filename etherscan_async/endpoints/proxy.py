"""Geth/Parity JSON-RPC passthroughs.

Block numbers, indexes and quantities are sent as ``0x``-prefixed hex, so the
integer arguments here go through :func:`to_hex` before they reach a record.
"""

from etherscan_async.params import (
    AddressTagQuery,
    BlockTagBoolQuery,
    BlockTagIndexQuery,
    CallQuery,
    EstimateGasQuery,
    RawTxQuery,
    StoragePositionQuery,
    TxHashQuery,
    to_hex,
)

MODULE = "proxy"


class ProxyAPI:
    async def eth_block_number(self) -> str:
        return await self.execute(MODULE, "eth_blockNumber")

    async def eth_get_block_by_number(self, blockno: int, full_transactions: bool = False) -> str:
        params = BlockTagBoolQuery(tag=to_hex(blockno), boolean=full_transactions)
        return await self.execute(MODULE, "eth_getBlockByNumber", params)

    async def eth_get_uncle_by_block_number_and_index(self, blockno: int, index: int) -> str:
        params = BlockTagIndexQuery(tag=to_hex(blockno), index=to_hex(index))
        return await self.execute(MODULE, "eth_getUncleByBlockNumberAndIndex", params)

    async def eth_get_transaction_by_hash(self, tx_hash: str) -> str:
        return await self.execute(MODULE, "eth_getTransactionByHash", TxHashQuery(txhash=tx_hash))

    async def eth_get_transaction_by_block_number_and_index(self, blockno: int, index: int) -> str:
        params = BlockTagIndexQuery(tag=to_hex(blockno), index=to_hex(index))
        return await self.execute(MODULE, "eth_getTransactionByBlockNumberAndIndex", params)

    async def eth_get_transaction_count(self, address: str, tag: str = "latest") -> str:
        return await self.execute(MODULE, "eth_getTransactionCount", AddressTagQuery(address=address, tag=tag))

    async def eth_send_raw_transaction(self, raw_tx: str) -> str:
        """Submit a signed transaction; returns the transaction hash."""
        return await self.execute(MODULE, "eth_sendRawTransaction", RawTxQuery(hex=raw_tx))

    async def eth_get_transaction_receipt(self, tx_hash: str) -> str:
        return await self.execute(MODULE, "eth_getTransactionReceipt", TxHashQuery(txhash=tx_hash))

    async def eth_call(self, to: str, data: str, tag: str = "latest") -> str:
        """Execute a read-only message call without creating a transaction."""
        return await self.execute(MODULE, "eth_call", CallQuery(to=to, data=data, tag=tag))

    async def eth_get_code(self, address: str, tag: str = "latest") -> str:
        return await self.execute(MODULE, "eth_getCode", AddressTagQuery(address=address, tag=tag))

    async def eth_get_storage_at(self, address: str, position: str, tag: str = "latest") -> str:
        params = StoragePositionQuery(address=address, position=position, tag=tag)
        return await self.execute(MODULE, "eth_getStorageAt", params)

    async def eth_gas_price(self) -> str:
        return await self.execute(MODULE, "eth_gasPrice")

    async def eth_estimate_gas(self, to: str, data: str, value: int, gas: int, gas_price: int) -> str:
        """
        Estimate the gas a call would use.

        Args:
            to: Recipient or contract address.
            data: Method signature hash and encoded arguments, in hex.
            value: Wei sent with the call.
            gas: Gas provided for the call.
            gas_price: Price per unit of gas, in wei.
        """
        params = EstimateGasQuery(
            data=data,
            to=to,
            value=to_hex(value),
            gas=to_hex(gas),
            gas_price=to_hex(gas_price),
        )
        return await self.execute(MODULE, "eth_estimateGas", params)
