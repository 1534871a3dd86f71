from django.apps import AppConfig


class AtjConfig(AppConfig):
    name = 'atj'
    verbose_name = 'AST to JavaScript'
