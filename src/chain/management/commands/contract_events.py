import json

from django.core.management.base import BaseCommand, CommandError

from src.chain.presenters import contract_event_to_dto
from src.chain.selectors import contract_event_list
from src.common.ss58 import InvalidAddressError, ss58_decode


class Command(BaseCommand):
    help = "Print the most recent contract events recorded for an SS58 account"

    def add_arguments(self, parser):
        parser.add_argument("account", type=str)
        parser.add_argument("--json", action="store_true", help="Print a JSON array.")

    def handle(self, *args, **opts):
        try:
            account = ss58_decode(opts["account"])
        except InvalidAddressError as exc:
            raise CommandError(f"Invalid account: {exc}")

        events = [contract_event_to_dto(body, ts) for body, ts in contract_event_list(account=account)]

        if opts["json"]:
            self.stdout.write(json.dumps(events))
            return

        if not events:
            self.stdout.write(self.style.NOTICE("No events."))
            return
        for event in events:
            self.stdout.write(f"{event['timestamp']:>12}  {event['body']}")
