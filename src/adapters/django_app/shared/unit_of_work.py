"""
Unit of Work sobre transaction.atomic.

Os casos de uso que mexem em mais de uma tabela (remoção de usuário com
veículos e atividades, criação de declaração com sequência) rodam dentro
de um único bloco atômico. Como o bloco é aberto manualmente, dentro de
outra transação ele vira savepoint (é o que acontece sob pytest-django).
"""

from typing import Optional
import logging

from django.db import DEFAULT_DB_ALIAS, transaction

from src.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Example:
        with container.unit_of_work():
            vehicle_repo.delete_by_client(user_id)
            activity_repo.delete_by_user(user_id)
            user_repo.delete(user_id)

    Saída normal grava tudo; exceção dentro do bloco desfaz tudo.
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self._using = using
        self._atomic: Optional[transaction.Atomic] = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        self._committed = False
        self._rolled_back = False
        logger.debug("atomic block opened on %s", self._using)

    def commit(self) -> None:
        if self._atomic is None:
            logger.warning("commit without an open atomic block")
            return

        block, self._atomic = self._atomic, None
        try:
            block.__exit__(None, None, None)
        except Exception as e:
            logger.error(f"Commit failed on {self._using}: {e}")
            self._rolled_back = True
            raise
        self._committed = True
        logger.debug("atomic block committed")

    def rollback(self) -> None:
        if self._atomic is None:
            return

        block, self._atomic = self._atomic, None
        transaction.set_rollback(True, using=self._using)
        block.__exit__(None, None, None)
        self._rolled_back = True
        logger.debug("atomic block rolled back")

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """Só conta commits e marca rollback; usado com os repositórios em memória."""

    def __init__(self):
        self._committed = False
        self._rolled_back = False
        self.commit_count = 0

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        self._committed = True
        self.commit_count += 1

    def rollback(self) -> None:
        self._rolled_back = True

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    def reset(self) -> None:
        self._committed = False
        self._rolled_back = False
        self.commit_count = 0
