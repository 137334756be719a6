"""
Domínio de Veículos.

Frota de veículos vinculada a clientes.
"""

from .entities import VehicleEntity
from .dtos import VeiculoInputDTO, VehicleOutputDTO, VehicleStatsDTO

__all__ = [
    "VehicleEntity",
    "VeiculoInputDTO",
    "VehicleOutputDTO",
    "VehicleStatsDTO",
]
