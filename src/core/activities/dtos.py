"""
Data Transfer Objects (DTOs) do Domínio de Atividades.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from src.core.shared.exceptions import ValidationError
from src.core.shared.validation import read_text

from .entities import ActivityEntity


def parse_datetime(value, field_name: str) -> Optional[datetime]:
    """
    Converte string ISO-8601 em datetime.

    Datas sem fuso são tratadas como UTC.

    Raises:
        ValidationError: Se formato inválido
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            raise ValidationError(
                f"Data inválida para {field_name}: {value}",
                field=field_name,
            )
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarAtividadeInputDTO:
    """
    DTO de entrada para registrar atividade.

    Attributes:
        user_id: ID do usuário
        description: Descrição
        activity_date: Data/hora (opcional, default agora)
    """

    user_id: Optional[str]
    description: Optional[str]
    activity_date: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CriarAtividadeInputDTO":
        return cls(
            user_id=read_text(data, "user_id"),
            description=read_text(data, "description"),
            activity_date=parse_datetime(data.get("activity_date"), "activity_date"),
        )


@dataclass(frozen=True)
class AtualizarAtividadeInputDTO:
    """DTO de atualização: descrição obrigatória, data opcional."""

    description: Optional[str]
    activity_date: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "AtualizarAtividadeInputDTO":
        return cls(
            description=read_text(data, "description"),
            activity_date=parse_datetime(data.get("activity_date"), "activity_date"),
        )


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ActivityOutputDTO:
    """DTO de saída de atividade, com username do dono."""

    id: str
    user_id: str
    user_name: Optional[str]
    description: str
    activity_date: datetime

    @classmethod
    def from_entity(
        cls,
        entity: ActivityEntity,
        user_name: Optional[str] = None,
    ) -> "ActivityOutputDTO":
        return cls(
            id=entity.id,
            user_id=entity.user_id,
            user_name=user_name,
            description=entity.description,
            activity_date=entity.activity_date,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "user_name": self.user_name,
            "description": self.description,
            "activity_date": self.activity_date.isoformat(),
        }


@dataclass
class ActivityStatsDTO:
    """Estatísticas de atividades de um usuário."""

    total_activities: int
    today_activities: int

    def to_dict(self) -> dict:
        return {
            "total_activities": self.total_activities,
            "today_activities": self.today_activities,
        }
