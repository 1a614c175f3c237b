from etherscan_async.params import TxHashQuery

MODULE = "transaction"


class TransactionsAPI:
    async def get_transaction_status(self, tx_hash: str) -> str:
        """Contract execution status of a transaction."""
        return await self.execute(MODULE, "getstatus", TxHashQuery(txhash=tx_hash))

    async def get_transaction_receipt_status(self, tx_hash: str) -> str:
        """Receipt status of a post-Byzantium transaction."""
        return await self.execute(MODULE, "gettxreceiptstatus", TxHashQuery(txhash=tx_hash))
