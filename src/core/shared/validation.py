"""
Validação explícita de entrada.

Funções de validação retornam um ValidationResult com a lista de
erros por campo, em vez de lançar na primeira falha. O use case
decide quando transformar o resultado em exceção.

Example:
    result = ValidationResult()
    if not dto.username:
        result.add("username", "Username é obrigatório")
    result.raise_if_invalid()
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import FieldValidationError, ValidationError


@dataclass(frozen=True)
class FieldError:
    """Erro de validação associado a um campo."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    """
    Resultado acumulado de uma validação.

    Attributes:
        errors: Erros encontrados (vazio = válido)
    """

    errors: List[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> "ValidationResult":
        self.errors.append(FieldError(field_name, message))
        return self

    def require(self, field_name: str, value, message: str) -> "ValidationResult":
        """Adiciona erro se valor for None ou string em branco."""
        if value is None or (isinstance(value, str) and not value.strip()):
            self.add(field_name, message)
        return self

    def raise_if_invalid(self) -> None:
        """
        Lança FieldValidationError se houver erros.

        Raises:
            FieldValidationError: Com todos os erros acumulados
        """
        if self.errors:
            raise FieldValidationError([e.to_dict() for e in self.errors])


def is_blank(value) -> bool:
    """Verifica se valor é None ou string vazia/só espaços."""
    return value is None or (isinstance(value, str) and not value.strip())


def read_text(data: dict, field_name: str, max_length: Optional[int] = None) -> Optional[str]:
    """
    Lê um campo textual do corpo JSON.

    Ausente ou null vira None. Número, booleano, lista ou objeto no lugar
    de texto é rejeitado, assim como texto maior que a coluna.

    Raises:
        ValidationError: Tipo diferente de str ou tamanho acima de max_length
    """
    value = data.get(field_name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} deve ser texto", field=field_name)
    if max_length is not None and len(value) > max_length:
        raise ValidationError(
            f"{field_name} deve ter no máximo {max_length} caracteres",
            field=field_name,
        )
    return value
