"""
Ports (Interfaces) do Domínio de Declarações.

A numeração de declarações depende de um contador serializado
(next_sequence), nunca de count() + 1.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable
import threading

from .entities import DeclarationEntity, DeclarationStatus


@runtime_checkable
class DeclarationRepository(Protocol):
    """
    Interface para persistência de Declarações.

    Implementações:
    - DjangoDeclarationRepository (ORM, contador com select_for_update)
    - InMemoryDeclarationRepository (testes, contador com lock)
    """

    def save(self, declaration: DeclarationEntity) -> None:
        ...

    def get_by_id(self, declaration_id: str) -> Optional[DeclarationEntity]:
        ...

    def list_all(self) -> List[DeclarationEntity]:
        ...

    def list_by_client(self, client_id: str) -> List[DeclarationEntity]:
        ...

    def list_by_status(self, status: DeclarationStatus) -> List[DeclarationEntity]:
        ...

    def count_by_client(self, client_id: str) -> int:
        ...

    def count_by_client_and_status(self, client_id: str, status: DeclarationStatus) -> int:
        ...

    def delete(self, declaration_id: str) -> None:
        ...

    def delete_by_client(self, client_id: str) -> int:
        ...

    def next_sequence(self) -> int:
        """
        Próximo número da sequência de declarações.

        Deve ser seguro sob concorrência: duas chamadas nunca
        retornam o mesmo valor, mesmo após remoções.
        """
        ...


class InMemoryDeclarationRepository:
    """Implementação em memória do DeclarationRepository."""

    def __init__(self):
        self._declarations: Dict[str, DeclarationEntity] = {}
        self._sequence = 0
        self._lock = threading.Lock()

    @staticmethod
    def _newest_first(declarations) -> List[DeclarationEntity]:
        return sorted(declarations, key=lambda d: d.submitted_at, reverse=True)

    def save(self, declaration: DeclarationEntity) -> None:
        self._declarations[declaration.id] = declaration

    def get_by_id(self, declaration_id: str) -> Optional[DeclarationEntity]:
        return self._declarations.get(declaration_id)

    def list_all(self) -> List[DeclarationEntity]:
        return self._newest_first(self._declarations.values())

    def list_by_client(self, client_id: str) -> List[DeclarationEntity]:
        return self._newest_first(
            d for d in self._declarations.values() if d.client_id == client_id
        )

    def list_by_status(self, status: DeclarationStatus) -> List[DeclarationEntity]:
        return self._newest_first(
            d for d in self._declarations.values() if d.status == status
        )

    def count_by_client(self, client_id: str) -> int:
        return len(self.list_by_client(client_id))

    def count_by_client_and_status(self, client_id: str, status: DeclarationStatus) -> int:
        return len([d for d in self.list_by_client(client_id) if d.status == status])

    def delete(self, declaration_id: str) -> None:
        self._declarations.pop(declaration_id, None)

    def delete_by_client(self, client_id: str) -> int:
        ids = [d.id for d in self._declarations.values() if d.client_id == client_id]
        for declaration_id in ids:
            del self._declarations[declaration_id]
        return len(ids)

    def next_sequence(self) -> int:
        with self._lock:
            self._sequence += 1
            return self._sequence
