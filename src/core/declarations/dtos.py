"""
Data Transfer Objects (DTOs) do Domínio de Declarações.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

from src.core.shared.exceptions import ValidationError
from src.core.shared.validation import read_text

from .entities import DeclarationEntity

# Tamanho das colunas de customs_declarations
DECLARATION_TYPE_MAX_LENGTH = 50
TNVED_CODE_MAX_LENGTH = 20
PLACE_MAX_LENGTH = 100

# Parte inteira máxima de product_value (15,2) e net_weight (12,3)
PRODUCT_VALUE_INTEGER_DIGITS = 13
NET_WEIGHT_INTEGER_DIGITS = 9

INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1


def _to_decimal(value, field_name: str, integer_digits: int) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Valor inválido para {field_name}: {value}", field=field_name)
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Valor inválido para {field_name}: {value}", field=field_name)
    if not number.is_finite():
        raise ValidationError(f"{field_name} deve ser um número finito", field=field_name)
    if abs(number) >= Decimal(10) ** integer_digits:
        raise ValidationError(
            f"{field_name} excede {integer_digits} dígitos inteiros",
            field=field_name,
        )
    return number


def _to_int(value, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"Valor inválido para {field_name}: {value}", field=field_name)
    if not INT_MIN <= number <= INT_MAX:
        raise ValidationError(f"{field_name} fora do intervalo permitido", field=field_name)
    return number


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class DeclaracaoInputDTO:
    """
    DTO de entrada para criar ou substituir uma declaração.

    Na atualização, client_id é ignorado.
    """

    declaration_type: Optional[str]
    product_description: Optional[str]
    client_id: Optional[str] = None
    tnved_code: Optional[str] = None
    product_value: Optional[Decimal] = None
    net_weight: Optional[Decimal] = None
    quantity: Optional[int] = None
    country_of_origin: Optional[str] = None
    country_of_destination: Optional[str] = None
    customs_office: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "DeclaracaoInputDTO":
        return cls(
            declaration_type=read_text(data, "declaration_type", DECLARATION_TYPE_MAX_LENGTH),
            product_description=read_text(data, "product_description"),
            client_id=read_text(data, "client_id"),
            tnved_code=read_text(data, "tnved_code", TNVED_CODE_MAX_LENGTH),
            product_value=_to_decimal(
                data.get("product_value"), "product_value", PRODUCT_VALUE_INTEGER_DIGITS
            ),
            net_weight=_to_decimal(data.get("net_weight"), "net_weight", NET_WEIGHT_INTEGER_DIGITS),
            quantity=_to_int(data.get("quantity"), "quantity"),
            country_of_origin=read_text(data, "country_of_origin", PLACE_MAX_LENGTH),
            country_of_destination=read_text(data, "country_of_destination", PLACE_MAX_LENGTH),
            customs_office=read_text(data, "customs_office", PLACE_MAX_LENGTH),
        )


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class DeclarationOutputDTO:
    """DTO de saída de declaração, com nome do cliente."""

    id: str
    declaration_number: str
    client_id: str
    client_name: Optional[str]
    declaration_type: str
    tnved_code: Optional[str]
    product_description: str
    product_value: Decimal
    net_weight: Decimal
    quantity: int
    country_of_origin: Optional[str]
    country_of_destination: Optional[str]
    customs_office: Optional[str]
    status: str
    submitted_at: datetime
    reviewed_at: Optional[datetime]

    @classmethod
    def from_entity(
        cls,
        entity: DeclarationEntity,
        client_name: Optional[str] = None,
    ) -> "DeclarationOutputDTO":
        return cls(
            id=entity.id,
            declaration_number=entity.declaration_number,
            client_id=entity.client_id,
            client_name=client_name,
            declaration_type=entity.declaration_type,
            tnved_code=entity.tnved_code,
            product_description=entity.product_description,
            product_value=entity.product_value,
            net_weight=entity.net_weight,
            quantity=entity.quantity,
            country_of_origin=entity.country_of_origin,
            country_of_destination=entity.country_of_destination,
            customs_office=entity.customs_office,
            status=entity.status.value,
            submitted_at=entity.submitted_at,
            reviewed_at=entity.reviewed_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "declaration_number": self.declaration_number,
            "client_id": self.client_id,
            "client_name": self.client_name,
            "declaration_type": self.declaration_type,
            "tnved_code": self.tnved_code,
            "product_description": self.product_description,
            "product_value": str(self.product_value),
            "net_weight": str(self.net_weight),
            "quantity": self.quantity,
            "country_of_origin": self.country_of_origin,
            "country_of_destination": self.country_of_destination,
            "customs_office": self.customs_office,
            "status": self.status,
            "submitted_at": self.submitted_at.isoformat(),
            "reviewed_at": self.reviewed_at.isoformat() if self.reviewed_at else None,
        }


@dataclass
class DeclarationStatsDTO:
    """Contagem de declarações de um cliente, total e por status."""

    total_declarations: int
    by_status: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "total_declarations": self.total_declarations,
            "by_status": dict(self.by_status),
        }
