from ninja import Schema
from pydantic import field_validator

from src.common.ss58 import InvalidAddressError, ss58_decode


class PublicKeyItem(Schema):
    id: int
    address: str


class PublicKeyDeletePayload(Schema):
    account: str

    @field_validator("account")
    @classmethod
    def _validate_account(cls, v: str) -> str:
        v = (v or "").strip()
        try:
            ss58_decode(v)
        except InvalidAddressError as exc:
            raise ValueError(f"account: {exc}") from exc
        return v

    @property
    def address(self) -> bytes:
        return ss58_decode(self.account)
