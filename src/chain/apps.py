from django.apps import AppConfig


class ChainConfig(AppConfig):
    name = "src.chain"
    label = "chain"
