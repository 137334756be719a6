"""
Domínio de Declarações Aduaneiras.

Máquina de estados PENDING → APPROVED | REJECTED.
"""

from .entities import DeclarationEntity, DeclarationStatus
from .dtos import DeclaracaoInputDTO, DeclarationOutputDTO, DeclarationStatsDTO

__all__ = [
    "DeclarationEntity",
    "DeclarationStatus",
    "DeclaracaoInputDTO",
    "DeclarationOutputDTO",
    "DeclarationStatsDTO",
]
