from ninja_extra import ControllerBase, api_controller, route

from src.chain import selectors
from src.chain.presenters import contract_event_to_dto
from src.chain.schemas import ContractEventItem
from src.common.ss58 import InvalidAddressError, ss58_decode
from src.core.exceptions import DomainValidationError


def parse_account(value: str) -> bytes:
    try:
        return ss58_decode(value)
    except InvalidAddressError as exc:
        raise DomainValidationError(
            message="Invalid account address",
            code="INVALID_ACCOUNT",
            errors={"account": [str(exc)]},
        ) from exc


@api_controller("/contracts", tags=["Contracts"])
class ContractsController(ControllerBase):
    @route.get(
        "/events/{account}",
        response=list[ContractEventItem],
        summary="Get events related to the contract account.",
    )
    def list_events(self, account: str):
        """
        Smart contract events are discovered only after the initial activation
        of an event client. At most the 25 most recent events are returned.
        """
        address = parse_account(account)
        return [
            contract_event_to_dto(body, block_timestamp)
            for body, block_timestamp in selectors.contract_event_list(account=address)
        ]
