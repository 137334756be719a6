"""
Ports (Interfaces) do Domínio de Veículos.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import VehicleEntity


@runtime_checkable
class VehicleRepository(Protocol):
    """
    Interface para persistência de Veículos.

    Implementações:
    - DjangoVehicleRepository (ORM)
    - InMemoryVehicleRepository (testes)
    """

    def save(self, vehicle: VehicleEntity) -> None:
        ...

    def get_by_id(self, vehicle_id: str) -> Optional[VehicleEntity]:
        ...

    def get_by_license_plate(self, license_plate: str) -> Optional[VehicleEntity]:
        ...

    def exists_by_license_plate(self, license_plate: str) -> bool:
        ...

    def list_all(self) -> List[VehicleEntity]:
        ...

    def list_by_client(self, client_id: str) -> List[VehicleEntity]:
        ...

    def list_by_type(self, vehicle_type: str) -> List[VehicleEntity]:
        """Busca por tipo: 'contém', sem diferenciar maiúsculas."""
        ...

    def delete(self, vehicle_id: str) -> None:
        ...

    def delete_by_client(self, client_id: str) -> int:
        """Remove todos os veículos do cliente. Retorna quantidade removida."""
        ...


class InMemoryVehicleRepository:
    """Implementação em memória do VehicleRepository."""

    def __init__(self):
        self._vehicles: Dict[str, VehicleEntity] = {}

    def save(self, vehicle: VehicleEntity) -> None:
        self._vehicles[vehicle.id] = vehicle

    def get_by_id(self, vehicle_id: str) -> Optional[VehicleEntity]:
        return self._vehicles.get(vehicle_id)

    def get_by_license_plate(self, license_plate: str) -> Optional[VehicleEntity]:
        for vehicle in self._vehicles.values():
            if vehicle.license_plate == license_plate:
                return vehicle
        return None

    def exists_by_license_plate(self, license_plate: str) -> bool:
        return self.get_by_license_plate(license_plate) is not None

    def list_all(self) -> List[VehicleEntity]:
        return list(self._vehicles.values())

    def list_by_client(self, client_id: str) -> List[VehicleEntity]:
        return [v for v in self._vehicles.values() if v.client_id == client_id]

    def list_by_type(self, vehicle_type: str) -> List[VehicleEntity]:
        needle = vehicle_type.lower()
        return [
            v for v in self._vehicles.values()
            if v.vehicle_type and needle in v.vehicle_type.lower()
        ]

    def delete(self, vehicle_id: str) -> None:
        self._vehicles.pop(vehicle_id, None)

    def delete_by_client(self, client_id: str) -> int:
        ids = [v.id for v in self.list_by_client(client_id)]
        for vehicle_id in ids:
            del self._vehicles[vehicle_id]
        return len(ids)

    def count(self) -> int:
        return len(self._vehicles)
