"""Pydantic models for the wallet JSON-RPC wire format."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """One record of a `listtransactions` result. Immutable once decoded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    address: str = ""
    category: str = ""
    amount: float = 0.0
    label: str = ""
    confirmations: int = 0
    generated: bool = False
    blockhash: str = ""
    block_height: int = Field(default=0, alias="blockheight")
    block_index: int = Field(default=0, alias="blockindex")
    block_time: int = Field(default=0, alias="blocktime")
    txid: str = ""
    time: int = 0
    time_received: int = Field(default=0, alias="timereceived")

    @property
    def timestamp(self) -> datetime:
        """Local wall-clock time the wallet first saw the transaction."""
        return datetime.fromtimestamp(self.time_received)


class RpcError(BaseModel):
    code: int = 0
    message: str = ""


class ListTransactionsResponse(BaseModel):
    """JSON-RPC envelope returned by `listtransactions`."""

    model_config = ConfigDict(extra="ignore")

    result: Optional[List[Transaction]] = None
    error: Optional[RpcError] = None
    id: Any = None
