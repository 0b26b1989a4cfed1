from django.db import models


class Node(models.Model):
    """Chain endpoint watched by the indexer"""

    name = models.CharField(max_length=150, unique=True)
    url = models.CharField(max_length=500)
    confirmed_block = models.BigIntegerField(default=0)

    class Meta:
        db_table = "nodes"

    def __str__(self):
        return f"{self.name} ({self.url})"


class Code(models.Model):
    """Uploaded contract code, keyed by its 32-byte hash"""

    hash = models.BinaryField(max_length=32, unique=True)
    code = models.BinaryField()

    class Meta:
        db_table = "codes"


class Contract(models.Model):
    """Deployed contract instance"""

    node = models.ForeignKey(Node, on_delete=models.CASCADE, related_name="contracts")
    code_hash = models.BinaryField(max_length=32)
    address = models.BinaryField(max_length=32)
    owner = models.BinaryField(max_length=32, null=True, blank=True)

    class Meta:
        db_table = "contracts"
        constraints = [
            models.UniqueConstraint(fields=["node", "address"], name="contract_node_address_unique"),
        ]


class Event(models.Model):
    """
    Contract activity captured by the indexer. Append-only: never updated or
    deleted by the API. ``body`` is serialized JSON kept as text.
    """

    class EventType(models.TextChoices):
        INSTANTIATION = "instantiation", "Instantiation"
        CODE_HASH_UPDATE = "code_hash_update", "Code hash update"
        TERMINATION = "termination", "Termination"

    node = models.ForeignKey(Node, on_delete=models.CASCADE, related_name="events")
    account = models.BinaryField(max_length=32)
    event_type = models.CharField(max_length=32, choices=EventType.choices)
    body = models.TextField()
    block_timestamp = models.DateTimeField()

    class Meta:
        db_table = "events"
        indexes = [
            models.Index(fields=["account", "-block_timestamp"], name="event_account_ts_idx"),
        ]

    def __str__(self):
        return f"[{self.event_type}] event:{self.pk} at {self.block_timestamp:%Y-%m-%d %H:%M:%S}"
