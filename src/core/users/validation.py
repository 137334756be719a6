"""
Validação de cadastro de usuários.

Duas etapas:
- validar_entrada_registro: formato dos campos (acumula erros)
- regras de negócio ficam no RegistrarUsuarioService (param no 1º erro)
"""

import re

from src.core.shared.validation import ValidationResult, is_blank

from .entities import UserRole

UNP_PATTERN = re.compile(r"^\d{9}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def unp_tem_formato_valido(unp) -> bool:
    """UNP válido tem exatamente 9 dígitos."""
    return isinstance(unp, str) and bool(UNP_PATTERN.match(unp))


def validar_entrada_registro(dto) -> ValidationResult:
    """
    Valida campos obrigatórios e formatos do cadastro.

    Args:
        dto: RegistrarUsuarioInputDTO

    Returns:
        ValidationResult com todos os erros encontrados
    """
    result = ValidationResult()
    result.require("username", dto.username, "Username é obrigatório")
    result.require("password", dto.password, "Senha é obrigatória")

    if is_blank(dto.role):
        result.add("role", "Papel é obrigatório")
    else:
        try:
            UserRole.from_string(dto.role)
        except ValueError as e:
            result.add("role", str(e))

    if not is_blank(dto.email) and not EMAIL_PATTERN.match(dto.email):
        result.add("email", "E-mail inválido")

    return result
