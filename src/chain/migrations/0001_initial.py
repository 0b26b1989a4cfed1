import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Node",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=150, unique=True)),
                ("url", models.CharField(max_length=500)),
                ("confirmed_block", models.BigIntegerField(default=0)),
            ],
            options={
                "db_table": "nodes",
            },
        ),
        migrations.CreateModel(
            name="Code",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("hash", models.BinaryField(max_length=32, unique=True)),
                ("code", models.BinaryField()),
            ],
            options={
                "db_table": "codes",
            },
        ),
        migrations.CreateModel(
            name="Contract",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code_hash", models.BinaryField(max_length=32)),
                ("address", models.BinaryField(max_length=32)),
                ("owner", models.BinaryField(blank=True, max_length=32, null=True)),
                (
                    "node",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="contracts",
                        to="chain.node",
                    ),
                ),
            ],
            options={
                "db_table": "contracts",
                "constraints": [
                    models.UniqueConstraint(fields=("node", "address"), name="contract_node_address_unique"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("account", models.BinaryField(max_length=32)),
                (
                    "event_type",
                    models.CharField(
                        choices=[
                            ("instantiation", "Instantiation"),
                            ("code_hash_update", "Code hash update"),
                            ("termination", "Termination"),
                        ],
                        max_length=32,
                    ),
                ),
                ("body", models.TextField()),
                ("block_timestamp", models.DateTimeField()),
                (
                    "node",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="events",
                        to="chain.node",
                    ),
                ),
            ],
            options={
                "db_table": "events",
                "indexes": [
                    models.Index(fields=["account", "-block_timestamp"], name="event_account_ts_idx"),
                ],
            },
        ),
    ]
