from django.apps import AppConfig


class Intelligent404Config(AppConfig):
    """Configuration for the intelligent404 Django app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'intelligent404'
    verbose_name = 'Intelligent 404'
