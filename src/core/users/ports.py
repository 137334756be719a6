"""
Ports (Interfaces) do Domínio de Usuários.

- UserRepository: persistência de usuários
- UnpRepository: leitura da tabela de referência de UNP

Inclui implementações em memória para testes e prototipagem.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import UnpEntity, UserEntity, UserRole


@runtime_checkable
class UserRepository(Protocol):
    """
    Interface para persistência de Usuários.

    Implementações:
    - DjangoUserRepository (ORM)
    - InMemoryUserRepository (testes)
    """

    def save(self, user: UserEntity) -> None:
        """Persiste usuário (create ou update)."""
        ...

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        ...

    def get_by_username(self, username: str) -> Optional[UserEntity]:
        ...

    def exists_by_username(self, username: str) -> bool:
        ...

    def exists_by_unp(self, unp: str) -> bool:
        """Verifica se o UNP já está vinculado a algum usuário."""
        ...

    def list_all(self) -> List[UserEntity]:
        ...

    def list_by_role(self, role: UserRole) -> List[UserEntity]:
        ...

    def delete(self, user_id: str) -> None:
        ...


@runtime_checkable
class UnpRepository(Protocol):
    """Interface de leitura da tabela de UNP."""

    def get_by_value(self, unp: str) -> Optional[UnpEntity]:
        ...

    def exists(self, unp: str) -> bool:
        ...


class InMemoryUserRepository:
    """
    Implementação em memória do UserRepository.

    Example:
        repo = InMemoryUserRepository()
        repo.save(user)
        found = repo.get_by_username("acme1")
    """

    def __init__(self):
        self._users: Dict[str, UserEntity] = {}

    def save(self, user: UserEntity) -> None:
        self._users[user.id] = user

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        return self._users.get(user_id)

    def get_by_username(self, username: str) -> Optional[UserEntity]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def exists_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def exists_by_unp(self, unp: str) -> bool:
        return any(u.unp_value == unp for u in self._users.values())

    def list_all(self) -> List[UserEntity]:
        return list(self._users.values())

    def list_by_role(self, role: UserRole) -> List[UserEntity]:
        return [u for u in self._users.values() if u.role == role]

    def delete(self, user_id: str) -> None:
        self._users.pop(user_id, None)

    def count(self) -> int:
        return len(self._users)

    def clear(self) -> None:
        self._users.clear()


class InMemoryUnpRepository:
    """
    Tabela de UNP em memória.

    Example:
        repo = InMemoryUnpRepository(["123456789"])
    """

    def __init__(self, values: Optional[List[str]] = None):
        self._rows: Dict[str, UnpEntity] = {}
        for i, value in enumerate(values or [], start=1):
            self.add(UnpEntity(id=i, unp=value))

    def add(self, unp: UnpEntity) -> None:
        self._rows[unp.unp] = unp

    def get_by_value(self, unp: str) -> Optional[UnpEntity]:
        return self._rows.get(unp)

    def exists(self, unp: str) -> bool:
        return unp in self._rows
