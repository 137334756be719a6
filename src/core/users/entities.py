"""
Entidades do Domínio de Usuários.

Entidades:
- UserRole: Papéis possíveis (CLIENT, DRIVER, ADMIN)
- UnpEntity: Registro de referência de UNP (número fiscal de 9 dígitos)
- UserEntity: Usuário do sistema (cliente, motorista ou administrador)

Regras de Negócio Encapsuladas:
- Motorista nunca guarda dados de empresa (name, unp, activity_type)
- Atualização parcial só altera campos informados
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
import uuid


class UserRole(Enum):
    """Papéis de usuário."""

    CLIENT = "CLIENT"
    DRIVER = "DRIVER"
    ADMIN = "ADMIN"

    @classmethod
    def from_string(cls, value: str) -> "UserRole":
        """
        Converte string para enum.

        Raises:
            ValueError: Se valor inválido
        """
        try:
            return cls[value.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Papel inválido: {value}")


@dataclass
class UnpEntity:
    """
    Registro de referência de UNP.

    Somente leitura para a aplicação; mantido via admin
    ou comando de carga.
    """

    unp: str
    company_name: Optional[str] = None
    id: Optional[int] = None


@dataclass
class UserEntity:
    """
    Entidade de Domínio: Usuário.

    Invariantes:
    - username único (garantido pelo use case + constraint do banco)
    - senha sempre armazenada como hash
    - CLIENT possui UNP vinculado; DRIVER não possui name/unp/activity_type

    Attributes:
        id: Identificador único (UUID)
        username: Login único
        password: Hash da senha
        role: Papel do usuário
        name: Nome da empresa (clientes)
        email: E-mail de contato
        activity_type: Ramo de atividade
        unp: Registro de UNP vinculado (clientes)
        verified: Se o UNP passou na verificação
        created_at: Data/hora de cadastro
    """

    username: str
    password: str
    role: UserRole
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: Optional[str] = None
    email: Optional[str] = None
    activity_type: Optional[str] = None
    unp: Optional[UnpEntity] = None
    verified: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_client(self) -> bool:
        return self.role == UserRole.CLIENT

    @property
    def is_driver(self) -> bool:
        return self.role == UserRole.DRIVER

    @property
    def unp_value(self) -> Optional[str]:
        return self.unp.unp if self.unp else None

    def vincular_unp(self, unp: UnpEntity, verified: bool) -> None:
        """Vincula registro de UNP ao cliente."""
        self.unp = unp
        self.verified = verified

    def limpar_dados_empresa(self) -> None:
        """Motoristas não guardam dados de empresa."""
        self.name = None
        self.unp = None
        self.activity_type = None

    def atualizar_dados(
        self,
        email: Optional[str] = None,
        name: Optional[str] = None,
        activity_type: Optional[str] = None,
    ) -> None:
        """
        Atualização parcial: só altera os campos não-None.
        """
        if email is not None:
            self.email = email
        if name is not None:
            self.name = name
        if activity_type is not None:
            self.activity_type = activity_type
