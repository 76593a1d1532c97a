"""
Signing options.

Typed options passed to the signing pipeline instead of loose keyword
arguments.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class SigningOptions(BaseModel):
    """
    Account and network a signature is requested for.

    Both are forwarded to the signer capability unchanged; the account id
    also becomes the transaction's signer id when a transaction is built
    from parts.
    """
    account_id: Optional[str] = Field(default=None, alias="accountId", description="Signing account")
    network_id: Optional[str] = Field(default=None, alias="networkId", description="Target network, e.g. mainnet or testnet")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("account_id", "network_id")
    @classmethod
    def _strip(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary, omitting unset values."""
        result: Dict[str, Any] = {}
        if self.account_id is not None:
            result["accountId"] = self.account_id
        if self.network_id is not None:
            result["networkId"] = self.network_id
        return result
