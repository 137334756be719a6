"""
Domínio de Usuários.

Cadastro de clientes (empresas com UNP) e motoristas.
"""

from .entities import UserEntity, UserRole, UnpEntity
from .dtos import RegistrarUsuarioInputDTO, AtualizarUsuarioInputDTO, UserOutputDTO

__all__ = [
    "UserEntity",
    "UserRole",
    "UnpEntity",
    "RegistrarUsuarioInputDTO",
    "AtualizarUsuarioInputDTO",
    "UserOutputDTO",
]
