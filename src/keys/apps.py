from django.apps import AppConfig


class KeysConfig(AppConfig):
    name = "src.keys"
    label = "keys"
