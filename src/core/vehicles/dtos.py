"""
Data Transfer Objects (DTOs) do Domínio de Veículos.
"""

from dataclasses import dataclass
from datetime import datetime
import math
from typing import Optional

from src.core.shared.exceptions import ValidationError
from src.core.shared.validation import read_text

from .entities import VehicleEntity

# Tamanho das colunas de customs_vehicles
LICENSE_PLATE_MAX_LENGTH = 20
MODEL_MAX_LENGTH = 100
VEHICLE_TYPE_MAX_LENGTH = 50

INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1


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


def _to_float(value, field_name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Valor inválido para {field_name}: {value}", field=field_name)
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} deve ser um número finito", field=field_name)
    return number


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class VeiculoInputDTO:
    """
    DTO de entrada para criar ou substituir um veículo.

    Na atualização, client_id é ignorado (o dono não muda).
    """

    license_plate: Optional[str]
    client_id: Optional[str] = None
    model: Optional[str] = None
    vehicle_type: Optional[str] = None
    year_of_manufacture: Optional[int] = None
    capacity: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "VeiculoInputDTO":
        return cls(
            license_plate=read_text(data, "license_plate", LICENSE_PLATE_MAX_LENGTH),
            client_id=read_text(data, "client_id"),
            model=read_text(data, "model", MODEL_MAX_LENGTH),
            vehicle_type=read_text(data, "vehicle_type", VEHICLE_TYPE_MAX_LENGTH),
            year_of_manufacture=_to_int(data.get("year_of_manufacture"), "year_of_manufacture"),
            capacity=_to_float(data.get("capacity"), "capacity"),
        )


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class VehicleOutputDTO:
    """DTO de saída de veículo, com nome do cliente."""

    id: str
    license_plate: str
    model: Optional[str]
    vehicle_type: Optional[str]
    year_of_manufacture: Optional[int]
    capacity: Optional[float]
    client_id: str
    client_name: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls,
        entity: VehicleEntity,
        client_name: Optional[str] = None,
    ) -> "VehicleOutputDTO":
        return cls(
            id=entity.id,
            license_plate=entity.license_plate,
            model=entity.model,
            vehicle_type=entity.vehicle_type,
            year_of_manufacture=entity.year_of_manufacture,
            capacity=entity.capacity,
            client_id=entity.client_id,
            client_name=client_name,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "license_plate": self.license_plate,
            "model": self.model,
            "vehicle_type": self.vehicle_type,
            "year_of_manufacture": self.year_of_manufacture,
            "capacity": self.capacity,
            "client_id": self.client_id,
            "client_name": self.client_name,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass
class VehicleStatsDTO:
    """Estatísticas de frota de um cliente."""

    total_vehicles: int
    trucks_count: int
    total_capacity: float

    def to_dict(self) -> dict:
        return {
            "total_vehicles": self.total_vehicles,
            "trucks_count": self.trucks_count,
            "total_capacity": self.total_capacity,
        }
