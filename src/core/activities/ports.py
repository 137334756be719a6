"""
Ports (Interfaces) do Domínio de Atividades.

Listagens por usuário são ordenadas da mais recente para a mais antiga.
Intervalos de data são inclusivos nos dois extremos.
"""

from datetime import datetime
from typing import Dict, List, Optional, Protocol, Tuple, runtime_checkable

from .entities import ActivityEntity


@runtime_checkable
class ActivityRepository(Protocol):
    """
    Interface para persistência de Atividades.

    Implementações:
    - DjangoActivityRepository (ORM)
    - InMemoryActivityRepository (testes)
    """

    def save(self, activity: ActivityEntity) -> None:
        ...

    def get_by_id(self, activity_id: str) -> Optional[ActivityEntity]:
        ...

    def list_all(self) -> List[ActivityEntity]:
        ...

    def list_by_user(self, user_id: str) -> List[ActivityEntity]:
        ...

    def list_recent_by_user(self, user_id: str, limit: int) -> List[ActivityEntity]:
        ...

    def list_by_user_paginated(
        self, user_id: str, page: int, per_page: int
    ) -> Tuple[List[ActivityEntity], int]:
        """Retorna (itens da página, total)."""
        ...

    def list_between(self, start: datetime, end: datetime) -> List[ActivityEntity]:
        ...

    def list_by_user_between(
        self, user_id: str, start: datetime, end: datetime
    ) -> List[ActivityEntity]:
        ...

    def search_by_user(self, user_id: str, keyword: str) -> List[ActivityEntity]:
        """Descrição contém keyword (case-insensitive)."""
        ...

    def count_by_user(self, user_id: str) -> int:
        ...

    def count_by_user_between(self, user_id: str, start: datetime, end: datetime) -> int:
        """Conta atividades em [start, end)."""
        ...

    def delete(self, activity_id: str) -> None:
        ...

    def delete_by_user(self, user_id: str) -> int:
        ...


class InMemoryActivityRepository:
    """Implementação em memória do ActivityRepository."""

    def __init__(self):
        self._activities: Dict[str, ActivityEntity] = {}

    @staticmethod
    def _newest_first(activities) -> List[ActivityEntity]:
        return sorted(activities, key=lambda a: a.activity_date, reverse=True)

    def save(self, activity: ActivityEntity) -> None:
        self._activities[activity.id] = activity

    def get_by_id(self, activity_id: str) -> Optional[ActivityEntity]:
        return self._activities.get(activity_id)

    def list_all(self) -> List[ActivityEntity]:
        return self._newest_first(self._activities.values())

    def list_by_user(self, user_id: str) -> List[ActivityEntity]:
        return self._newest_first(
            a for a in self._activities.values() if a.user_id == user_id
        )

    def list_recent_by_user(self, user_id: str, limit: int) -> List[ActivityEntity]:
        return self.list_by_user(user_id)[:limit]

    def list_by_user_paginated(
        self, user_id: str, page: int, per_page: int
    ) -> Tuple[List[ActivityEntity], int]:
        items = self.list_by_user(user_id)
        offset = (page - 1) * per_page
        return items[offset:offset + per_page], len(items)

    def list_between(self, start: datetime, end: datetime) -> List[ActivityEntity]:
        return self._newest_first(
            a for a in self._activities.values() if start <= a.activity_date <= end
        )

    def list_by_user_between(
        self, user_id: str, start: datetime, end: datetime
    ) -> List[ActivityEntity]:
        return [a for a in self.list_between(start, end) if a.user_id == user_id]

    def search_by_user(self, user_id: str, keyword: str) -> List[ActivityEntity]:
        needle = keyword.lower()
        return [a for a in self.list_by_user(user_id) if needle in a.description.lower()]

    def count_by_user(self, user_id: str) -> int:
        return len(self.list_by_user(user_id))

    def count_by_user_between(self, user_id: str, start: datetime, end: datetime) -> int:
        return len([
            a for a in self._activities.values()
            if a.user_id == user_id and start <= a.activity_date < end
        ])

    def delete(self, activity_id: str) -> None:
        self._activities.pop(activity_id, None)

    def delete_by_user(self, user_id: str) -> int:
        ids = [a.id for a in self._activities.values() if a.user_id == user_id]
        for activity_id in ids:
            del self._activities[activity_id]
        return len(ids)
