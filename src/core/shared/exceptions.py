"""
Exceções de domínio do back office aduaneiro.

Os casos de uso lançam estas exceções e a camada HTTP as converte em
status (400, 404, 422). Nenhuma delas depende de Django.

Hierarquia:
    DomainException
    ├── ValidationError              -> 400
    │   └── FieldValidationError     -> 400, com a lista de campos
    ├── EntityNotFoundError          -> 404
    └── BusinessRuleViolationError   -> 422
"""

from typing import List, Optional


class DomainException(Exception):
    """
    Raiz das exceções de domínio.

    `code` identifica o erro no corpo da resposta; quando omitido, vale o
    nome da classe.
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Forma usada no campo `meta` do envelope de erro da API."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Entrada rejeitada: campo obrigatório vazio, formato de UNP inválido,
    placa repetida, valor negativo.

    Example:
        raise ValidationError("Placa já cadastrada", field="license_plate")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.field:
            data["field"] = self.field
        return data


class FieldValidationError(ValidationError):
    """
    Vários campos inválidos de uma vez.

    Attributes:
        errors: [{"field": ..., "message": ...}] na ordem em que foram achados
    """

    def __init__(self, errors: List[dict], message: Optional[str] = None):
        self.errors = list(errors)
        only_field = self.errors[0]["field"] if len(self.errors) == 1 else None
        super().__init__(
            message or "; ".join(e["message"] for e in self.errors) or "Dados inválidos",
            field=only_field,
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class EntityNotFoundError(DomainException):
    """Usuário, veículo, atividade ou declaração inexistente."""

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.entity_type:
            data["entity_type"] = self.entity_type
        if self.entity_id:
            data["entity_id"] = self.entity_id
        return data


class BusinessRuleViolationError(DomainException):
    """
    Operação válida na forma mas proibida pelo estado atual.

    `rule` nomeia a regra (ex.: DECLARATION_NOT_PENDING,
    INVALID_STATUS_TRANSITION).
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.rule:
            data["rule"] = self.rule
        return data
