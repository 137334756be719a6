"""
Ports compartilhados pelos domínios do back office.

- UnitOfWork: bloco transacional usado pelos casos de uso de escrita
- PasswordHasher: hash de senha dos usuários cadastrados
- Clock: fonte de "agora" para created_at/updated_at, numeração e
  estatísticas do dia

Os adapters Django implementam estes contratos; o core nunca importa Django.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class UnitOfWork(ABC):
    """
    Bloco transacional como context manager.

        with uow:
            declaration_repo.next_sequence()
            declaration_repo.save(declaracao)

    Saída sem erro chama commit(); exceção chama rollback() e é propagada.
    """

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    @abstractmethod
    def _begin_transaction(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError


class PasswordHasher(ABC):
    """A senha chega em texto puro ao caso de uso e sai daqui já com hash."""

    @abstractmethod
    def hash(self, raw_password: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def verify(self, raw_password: str, hashed: str) -> bool:
        raise NotImplementedError


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    """Relógio real em UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """
    Relógio parado, ajustável à mão.

    Example:
        clock = FixedClock(datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc))
        clock.advance(days=1)
    """

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def advance(self, **kwargs) -> None:
        self._instant = self._instant + timedelta(**kwargs)
