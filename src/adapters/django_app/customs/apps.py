"""
Configuração do Django App do back office aduaneiro.
"""

from django.apps import AppConfig


class CustomsConfig(AppConfig):
    """Configuração do app customs."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.customs'
    label = 'customs'
    verbose_name = 'Back Office Aduaneiro'
