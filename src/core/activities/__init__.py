"""
Domínio de Atividades.

Registro de atividades por usuário.
"""

from .entities import ActivityEntity
from .dtos import (
    CriarAtividadeInputDTO,
    AtualizarAtividadeInputDTO,
    ActivityOutputDTO,
    ActivityStatsDTO,
)

__all__ = [
    "ActivityEntity",
    "CriarAtividadeInputDTO",
    "AtualizarAtividadeInputDTO",
    "ActivityOutputDTO",
    "ActivityStatsDTO",
]
