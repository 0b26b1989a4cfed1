from django.http import HttpResponse
from ninja import Body
from ninja_extra import ControllerBase, api_controller, route

from src.auth.authentication import TokenAuth
from src.keys import selectors, services
from src.keys.presenters import public_key_to_dto
from src.keys.schemas import PublicKeyDeletePayload, PublicKeyItem


@api_controller("/keys", tags=["Keys"], auth=TokenAuth())
class PublicKeysController(ControllerBase):
    @route.get("", response=list[PublicKeyItem], summary="List public keys attached to the current user.")
    def list_public_keys(self):
        user = self.context.request.auth
        keys = selectors.public_key_list(user=user)
        return [public_key_to_dto(k) for k in keys]

    @route.delete("", summary="Delete public key attached to the current user.")
    def delete_public_key(self, payload: PublicKeyDeletePayload = Body(...)):
        """
        Does not tell whether the key was attached to the current user:
        the answer is an empty 200 in both cases.
        """
        user = self.context.request.auth
        services.public_key_delete(user=user, address=payload.address)
        return HttpResponse(status=200)
