"""
Entidades do Domínio de Atividades.

Uma atividade é um registro livre (descrição + data) associado
a um usuário.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
import uuid

from src.core.shared.exceptions import ValidationError
from src.core.shared.validation import is_blank


@dataclass
class ActivityEntity:
    """
    Entidade de Domínio: Atividade.

    Attributes:
        id: Identificador único (UUID)
        user_id: ID do usuário dono da atividade
        description: Descrição livre
        activity_date: Data/hora da atividade
    """

    user_id: str
    description: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    activity_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    DESCRIPTION_MAX_LENGTH = 1000

    @classmethod
    def criar(
        cls,
        user_id: str,
        description: str,
        activity_date: Optional[datetime] = None,
        agora: Optional[datetime] = None,
    ) -> "ActivityEntity":
        """
        Factory method com validações.

        activity_date ausente assume o instante atual.
        """
        if is_blank(user_id):
            raise ValidationError("Usuário é obrigatório", field="user_id")
        cls._validar_descricao(description)

        return cls(
            user_id=user_id,
            description=description.strip(),
            activity_date=activity_date or agora or datetime.now(timezone.utc),
        )

    @classmethod
    def _validar_descricao(cls, description: str) -> None:
        if is_blank(description):
            raise ValidationError("Descrição é obrigatória", field="description")
        if len(description.strip()) > cls.DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Descrição deve ter no máximo {cls.DESCRIPTION_MAX_LENGTH} caracteres",
                field="description",
            )

    def atualizar(self, description: str, activity_date: Optional[datetime] = None) -> None:
        """Substitui a descrição; a data só muda quando informada."""
        self._validar_descricao(description)
        self.description = description.strip()
        if activity_date is not None:
            self.activity_date = activity_date
