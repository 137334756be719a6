"""
Adapters de segurança e relógio baseados no Django.

- DjangoPasswordHasher: usa os hashers configurados em PASSWORD_HASHERS
- DjangoClock: usa django.utils.timezone (respeita USE_TZ)
"""

from datetime import datetime

from django.contrib.auth.hashers import check_password, make_password
from django.utils import timezone

from src.core.shared.interfaces import Clock, PasswordHasher


class DjangoPasswordHasher(PasswordHasher):
    """Hash de senha pelo mecanismo de hashers do Django."""

    def hash(self, raw_password: str) -> str:
        return make_password(raw_password)

    def verify(self, raw_password: str, hashed: str) -> bool:
        return check_password(raw_password, hashed)


class DjangoClock(Clock):
    """Relógio do Django (aware quando USE_TZ=True)."""

    def now(self) -> datetime:
        return timezone.now()
