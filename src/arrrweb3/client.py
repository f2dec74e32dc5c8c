"""
ARRRweb3 - Typed bindings for the Pirate daemon's JSON-RPC API.

Each coroutine maps to exactly one daemon RPC method: it fills in
defaults for omitted parameters, forwards the ordered parameter list to
the provider and returns the daemon's result untouched.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import httpx

from . import utils
from .errors import ARRRweb3Error
from .provider import EndpointConfig, HttpProvider


class ARRRweb3:
    """Client for a Pirate Chain daemon."""

    def __init__(
        self,
        endpoint: Union[str, EndpointConfig],
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.provider = HttpProvider(endpoint, transport=transport)
        self.utils = utils

    # ============ Misc ============

    async def is_connected(self) -> bool:
        """Check whether the daemon answers; never raises."""
        try:
            res = await self.provider.raw_call("getnetworkinfo")
        except ARRRweb3Error:
            return False
        return isinstance(res, dict)

    # ============ Blockchain ============

    async def get_block(self, block_hash: str, verbose: bool = True) -> Union[Dict[str, Any], str]:
        """
        Get block info for a block hash.

        Args:
            block_hash: The block hash to look up
            verbose: True for a JSON object, False for hex-encoded data
        """
        return await self.provider.raw_call("getblock", [block_hash, verbose])

    async def get_blockchain_info(self) -> Dict[str, Any]:
        """Get state info regarding blockchain processing."""
        return await self.provider.raw_call("getblockchaininfo")

    async def get_block_count(self) -> int:
        """Get the current synced block height."""
        return await self.provider.raw_call("getblockcount")

    async def get_block_hash(self, block_num: int) -> str:
        return await self.provider.raw_call("getblockhash", [block_num])

    async def get_transaction_receipt(self, txid: str) -> List[Dict[str, Any]]:
        return await self.provider.raw_call("gettransactionreceipt", [txid])

    # ============ Control ============

    async def get_info(self) -> Dict[str, Any]:
        return await self.provider.raw_call("getinfo")

    # ============ Network ============

    async def get_peer_info(self) -> List[Dict[str, Any]]:
        """Get data about each connected node."""
        return await self.provider.raw_call("getpeerinfo")

    # ============ Util ============

    async def validate_address(self, address: str) -> Dict[str, Any]:
        """Ask the daemon whether an address is a valid Pirate address."""
        return await self.provider.raw_call("validateaddress", [address])

    # ============ Wallet ============

    async def list_transactions(self, most_recent: int) -> List[Dict[str, Any]]:
        """
        List the most recent shielded wallet transactions.

        Args:
            most_recent: Number of most recent transactions to return
        """
        return await self.provider.raw_call("zs_listtransactions", [0, 0, 0, most_recent])

    async def backup_wallet(self, destination: str) -> None:
        """
        Back up the wallet.

        Args:
            destination: The destination directory or file
        """
        return await self.provider.raw_call("backupwallet", [destination])

    async def dump_private_key(self, address: str) -> str:
        """Reveal the private key of a transparent address."""
        return await self.provider.raw_call("dumpprivkey", [address])

    async def z_export_key(self, address: str) -> str:
        """Reveal the private key of a shielded address."""
        return await self.provider.raw_call("z_exportkey", [address])

    async def encrypt_wallet(self, passphrase: str) -> str:
        """
        Encrypt the wallet for the first time.

        The daemon shuts down after encrypting.

        Args:
            passphrase: Passphrase to encrypt with (at least 1 character)
        """
        return await self.provider.raw_call("encryptwallet", [passphrase])

    async def get_account(self, address: str) -> str:
        return await self.provider.raw_call("getaccount", [address])

    async def get_account_address(self, acct_name: str = "") -> str:
        """
        Get the Pirate address for an account name.

        Args:
            acct_name: The account name ("" for default)
        """
        return await self.provider.raw_call("getaccountaddress", [acct_name])

    async def get_addresses_by_account(self, acct_name: str = "") -> List[str]:
        return await self.provider.raw_call("getaddressesbyaccount", [acct_name])

    async def get_new_address(self) -> str:
        """Get a new shielded address for receiving payments."""
        return await self.provider.raw_call("z_getnewaddress")

    async def get_transaction(self, txid: str) -> Dict[str, Any]:
        """
        Get shielded transaction details.

        Args:
            txid: The transaction id (64 char hex string)
        """
        return await self.provider.raw_call("zs_gettransaction", [txid])

    async def get_wallet_info(self) -> Dict[str, Any]:
        return await self.provider.raw_call("getwalletinfo")

    async def get_unconfirmed_balance(self) -> float:
        return await self.provider.raw_call("getunconfirmedbalance")

    async def import_address(self, address: str, label: str = "", rescan: bool = True) -> None:
        """
        Add a watch-only address. Cannot be used to spend.

        Args:
            address: The hex-encoded script (or address)
            label: An optional label
            rescan: Rescan the wallet for transactions
        """
        return await self.provider.raw_call("importaddress", [address, label, rescan])

    async def import_private_key(self, private_key: str, label: str = "", rescan: bool = True) -> str:
        return await self.provider.raw_call("importprivkey", [private_key, label, rescan])

    async def import_public_key(self, public_key: str, label: str = "", rescan: bool = True) -> None:
        """Add a watch-only address by public key. Cannot be used to spend."""
        return await self.provider.raw_call("importpubkey", [public_key, label, rescan])

    async def import_wallet(self, filename: str) -> None:
        """Import keys from a wallet dump file."""
        return await self.provider.raw_call("importwallet", [filename])

    async def list_address_groupings(self) -> List[List[List[Any]]]:
        """
        List groups of addresses whose common ownership was made public by
        common use as inputs or as change in past transactions.
        """
        return await self.provider.raw_call("listaddressgroupings")

    async def list_lock_unspent(self) -> List[Dict[str, Any]]:
        return await self.provider.raw_call("listlockunspent")

    async def list_unspent(self) -> List[Dict[str, Any]]:
        return await self.provider.raw_call("listunspent")

    async def send_to_address(
        self,
        address: str,
        amount: float,
        comment: str = "",
        comment_to: str = "",
        subtract_fee_from_amount: bool = False,
        replaceable: bool = True,
        conf_target: int = 6,
        estimate_mode: str = "UNSET",
        sender_address: Optional[str] = None,
        change_to_sender: bool = False,
    ) -> str:
        """
        Send an amount to an address.

        Args:
            address: Address to send Pirate to
            amount: Amount of Pirate to send
            comment: What the transaction is for
            comment_to: Name/organization the transaction is sent to
            subtract_fee_from_amount: Deduct the fee from the amount being sent
            replaceable: Allow replacement by a higher-fee transaction (BIP 125)
            conf_target: Confirmation target in blocks
            estimate_mode: One of "UNSET", "ECONOMICAL", "CONSERVATIVE"
            sender_address: Address to send the money from (null if omitted)
            change_to_sender: Return the change to the sender

        Returns:
            Transaction id
        """
        return await self.provider.raw_call(
            "sendtoaddress",
            [
                address,
                amount,
                comment,
                comment_to,
                subtract_fee_from_amount,
                replaceable,
                conf_target,
                estimate_mode,
                sender_address,
                change_to_sender,
            ],
        )

    async def set_tx_fee(self, amount: float) -> bool:
        """Set the transaction fee per kB, overriding paytxfee."""
        return await self.provider.raw_call("settxfee", [amount])

    async def wallet_lock(self) -> None:
        return await self.provider.raw_call("walletlock")

    async def wallet_passphrase(self, passphrase: str, timeout: int, staking_only: bool = False) -> None:
        """
        Unlock the encrypted wallet.

        Args:
            passphrase: The wallet passphrase
            timeout: Seconds to keep the wallet unlocked
            staking_only: Unlock for staking only
        """
        return await self.provider.raw_call("walletpassphrase", [passphrase, timeout, staking_only])

    async def wallet_passphrase_change(self, old_passphrase: str, new_passphrase: str) -> None:
        return await self.provider.raw_call("walletpassphrasechange", [old_passphrase, new_passphrase])
