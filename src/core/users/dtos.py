"""
Data Transfer Objects (DTOs) do Domínio de Usuários.

- Input DTOs: dados de cadastro e atualização
- Output DTOs: representação pública (sem senha)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.core.shared.validation import read_text

from .entities import UserEntity

# Tamanho das colunas de customs_users
USERNAME_MAX_LENGTH = 150
NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 254
ACTIVITY_TYPE_MAX_LENGTH = 255


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class RegistrarUsuarioInputDTO:
    """
    DTO de entrada para cadastro de usuário.

    Attributes:
        username: Login desejado
        password: Senha em texto puro (será convertida em hash)
        role: Papel ("CLIENT", "DRIVER"; "ADMIN" é recusado)
        name: Nome da empresa (obrigatório para CLIENT)
        email: E-mail opcional
        unp: UNP de 9 dígitos (obrigatório para CLIENT)
        activity_type: Ramo de atividade
    """

    username: Optional[str]
    password: Optional[str]
    role: Optional[str]
    name: Optional[str] = None
    email: Optional[str] = None
    unp: Optional[str] = None
    activity_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "RegistrarUsuarioInputDTO":
        return cls(
            username=read_text(data, "username", USERNAME_MAX_LENGTH),
            password=read_text(data, "password"),
            role=read_text(data, "role"),
            name=read_text(data, "name", NAME_MAX_LENGTH),
            email=read_text(data, "email", EMAIL_MAX_LENGTH),
            unp=read_text(data, "unp"),
            activity_type=read_text(data, "activity_type", ACTIVITY_TYPE_MAX_LENGTH),
        )


@dataclass(frozen=True)
class AtualizarUsuarioInputDTO:
    """
    DTO de atualização parcial. Campos None não são alterados.
    """

    email: Optional[str] = None
    name: Optional[str] = None
    activity_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "AtualizarUsuarioInputDTO":
        return cls(
            email=read_text(data, "email", EMAIL_MAX_LENGTH),
            name=read_text(data, "name", NAME_MAX_LENGTH),
            activity_type=read_text(data, "activity_type", ACTIVITY_TYPE_MAX_LENGTH),
        )


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class UserOutputDTO:
    """
    DTO de saída de usuário. Nunca inclui a senha.
    """

    id: str
    username: str
    role: str
    name: Optional[str]
    email: Optional[str]
    activity_type: Optional[str]
    unp: Optional[str]
    verified: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: UserEntity) -> "UserOutputDTO":
        return cls(
            id=entity.id,
            username=entity.username,
            role=entity.role.value,
            name=entity.name,
            email=entity.email,
            activity_type=entity.activity_type,
            unp=entity.unp_value,
            verified=entity.verified,
            created_at=entity.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
            "name": self.name,
            "email": self.email,
            "activity_type": self.activity_type,
            "unp": self.unp,
            "verified": self.verified,
            "created_at": self.created_at.isoformat(),
        }
