from src.common.ss58 import ss58_encode_default


def public_key_to_dto(key) -> dict:
    return {
        "id": key.id,
        "address": ss58_encode_default(bytes(key.address)),
    }
