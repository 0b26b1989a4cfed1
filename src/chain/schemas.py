from ninja import Schema


class ContractEventItem(Schema):
    body: str
    timestamp: int
