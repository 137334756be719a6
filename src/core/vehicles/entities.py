"""
Entidades do Domínio de Veículos.

Regras de Negócio Encapsuladas:
- Placa e cliente são obrigatórios
- Atualização substitui todos os campos mutáveis
- Classificação de caminhão pelo tipo do veículo
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
import uuid

from src.core.shared.exceptions import ValidationError
from src.core.shared.validation import is_blank


@dataclass
class VehicleEntity:
    """
    Entidade de Domínio: Veículo.

    Invariantes:
    - license_plate não vazia e única (unicidade garantida pelo use case)
    - client_id referencia um usuário existente

    Attributes:
        id: Identificador único (UUID)
        license_plate: Placa (única)
        model: Modelo
        vehicle_type: Tipo (ex: "Truck", "Van")
        year_of_manufacture: Ano de fabricação
        capacity: Capacidade de carga
        client_id: ID do cliente proprietário
        created_at: Data/hora de cadastro
        updated_at: Data/hora da última alteração
    """

    license_plate: str
    client_id: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    model: Optional[str] = None
    vehicle_type: Optional[str] = None
    year_of_manufacture: Optional[int] = None
    capacity: Optional[float] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    TRUCK_KEYWORD = "truck"

    @classmethod
    def criar(
        cls,
        license_plate: str,
        client_id: str,
        model: Optional[str] = None,
        vehicle_type: Optional[str] = None,
        year_of_manufacture: Optional[int] = None,
        capacity: Optional[float] = None,
        agora: Optional[datetime] = None,
    ) -> "VehicleEntity":
        """
        Factory method com validações.

        Raises:
            ValidationError: Se placa ou cliente ausentes
        """
        if is_blank(client_id):
            raise ValidationError("Cliente é obrigatório", field="client_id")
        cls._validar_placa(license_plate)

        agora = agora or datetime.now(timezone.utc)
        return cls(
            license_plate=license_plate.strip(),
            client_id=client_id,
            model=model,
            vehicle_type=vehicle_type,
            year_of_manufacture=year_of_manufacture,
            capacity=capacity,
            created_at=agora,
            updated_at=agora,
        )

    @classmethod
    def _validar_placa(cls, license_plate: str) -> None:
        if is_blank(license_plate):
            raise ValidationError("Placa é obrigatória", field="license_plate")

    @property
    def is_truck(self) -> bool:
        return bool(self.vehicle_type) and self.TRUCK_KEYWORD in self.vehicle_type.lower()

    def atualizar(
        self,
        license_plate: str,
        model: Optional[str],
        vehicle_type: Optional[str],
        year_of_manufacture: Optional[int],
        capacity: Optional[float],
        agora: Optional[datetime] = None,
    ) -> None:
        """Substitui todos os campos mutáveis."""
        self._validar_placa(license_plate)
        self.license_plate = license_plate.strip()
        self.model = model
        self.vehicle_type = vehicle_type
        self.year_of_manufacture = year_of_manufacture
        self.capacity = capacity
        self.updated_at = agora or datetime.now(timezone.utc)
