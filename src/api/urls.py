from ninja_extra import NinjaExtraAPI

from src.api.exception_handler import attach_exception_handlers
from src.chain.apis import ContractsController
from src.diagnostics.controllers.health_controller import HealthController
from src.keys.apis import PublicKeysController


api = NinjaExtraAPI(title="Chain Accounts API", version="1.0.0", csrf=False, docs_url=None)

# Register exception handlers in one place
attach_exception_handlers(api)

api.register_controllers(
    PublicKeysController,
    ContractsController,
    HealthController,
)
