"""
Repositórios Django do back office aduaneiro.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar os Protocols de src/core/*/ports.py
- Mapear entities para models e vice-versa
- Executar queries no banco via ORM
"""

from datetime import datetime
from typing import List, Optional, Tuple
import logging

from django.db.models import F

from src.core.users.entities import UnpEntity, UserEntity, UserRole
from src.core.vehicles.entities import VehicleEntity
from src.core.activities.entities import ActivityEntity
from src.core.declarations.entities import DeclarationEntity, DeclarationStatus

from ..shared.repository import BaseRepository, PaginationParams
from .mappers import (
    ActivityMapper,
    DeclarationMapper,
    UnpMapper,
    UserMapper,
    VehicleMapper,
)
from .models import (
    ActivityModel,
    DeclarationModel,
    SequenceModel,
    UnpModel,
    UserModel,
    VehicleModel,
)

logger = logging.getLogger(__name__)

DECLARATION_SEQUENCE = "declaration_number"


class DjangoUnpRepository:
    """Leitura da tabela de referência de UNP."""

    def get_by_value(self, unp: str) -> Optional[UnpEntity]:
        try:
            return UnpMapper.to_entity(UnpModel.objects.get(unp=unp))
        except UnpModel.DoesNotExist:
            return None

    def exists(self, unp: str) -> bool:
        return UnpModel.objects.filter(unp=unp).exists()


class DjangoUserRepository(BaseRepository[UserEntity, UserModel]):
    """
    Implementação Django do UserRepository.

    Example:
        repo = DjangoUserRepository()
        repo.save(user)
        repo.get_by_username("acme1")
    """

    model_class = UserModel
    mapper = UserMapper
    select_related_fields = ["unp"]
    default_order_field = "username"

    def save(self, user: UserEntity) -> None:
        if user.unp is not None and user.unp.id is None:
            user.unp.id = UnpModel.objects.values_list("id", flat=True).get(unp=user.unp.unp)
        super().save(user)

    def get_by_username(self, username: str) -> Optional[UserEntity]:
        model = self._get_base_queryset().filter(username=username).first()
        return self.mapper.to_entity(model) if model else None

    def exists_by_username(self, username: str) -> bool:
        return UserModel.objects.filter(username=username).exists()

    def exists_by_unp(self, unp: str) -> bool:
        return UserModel.objects.filter(unp__unp=unp).exists()

    def list_by_role(self, role: UserRole) -> List[UserEntity]:
        return self._to_entities(
            self._get_base_queryset().filter(role=role.value).order_by("username")
        )


class DjangoVehicleRepository(BaseRepository[VehicleEntity, VehicleModel]):
    """Implementação Django do VehicleRepository."""

    model_class = VehicleModel
    mapper = VehicleMapper
    default_order_field = "-created_at"

    def get_by_license_plate(self, license_plate: str) -> Optional[VehicleEntity]:
        model = VehicleModel.objects.filter(license_plate=license_plate).first()
        return self.mapper.to_entity(model) if model else None

    def exists_by_license_plate(self, license_plate: str) -> bool:
        return VehicleModel.objects.filter(license_plate=license_plate).exists()

    def list_by_client(self, client_id: str) -> List[VehicleEntity]:
        return self._to_entities(
            VehicleModel.objects.filter(client_id=client_id).order_by("-created_at")
        )

    def list_by_type(self, vehicle_type: str) -> List[VehicleEntity]:
        return self._to_entities(
            VehicleModel.objects.filter(vehicle_type__icontains=vehicle_type).order_by("-created_at")
        )

    def delete_by_client(self, client_id: str) -> int:
        deleted_count, _ = VehicleModel.objects.filter(client_id=client_id).delete()
        return deleted_count


class DjangoActivityRepository(BaseRepository[ActivityEntity, ActivityModel]):
    """
    Implementação Django do ActivityRepository.

    Listagens ordenadas da mais recente para a mais antiga.
    """

    model_class = ActivityModel
    mapper = ActivityMapper
    default_order_field = "-activity_date"

    def _by_user(self, user_id: str):
        return ActivityModel.objects.filter(user_id=user_id).order_by("-activity_date")

    def list_by_user(self, user_id: str) -> List[ActivityEntity]:
        return self._to_entities(self._by_user(user_id))

    def list_recent_by_user(self, user_id: str, limit: int) -> List[ActivityEntity]:
        return self._to_entities(self._by_user(user_id)[:limit])

    def list_by_user_paginated(
        self, user_id: str, page: int, per_page: int
    ) -> Tuple[List[ActivityEntity], int]:
        return self._paginate(self._by_user(user_id), PaginationParams(page=page, per_page=per_page))

    def list_between(self, start: datetime, end: datetime) -> List[ActivityEntity]:
        return self._to_entities(
            ActivityModel.objects.filter(activity_date__range=(start, end)).order_by("-activity_date")
        )

    def list_by_user_between(
        self, user_id: str, start: datetime, end: datetime
    ) -> List[ActivityEntity]:
        return self._to_entities(
            self._by_user(user_id).filter(activity_date__range=(start, end))
        )

    def search_by_user(self, user_id: str, keyword: str) -> List[ActivityEntity]:
        return self._to_entities(
            self._by_user(user_id).filter(description__icontains=keyword)
        )

    def count_by_user(self, user_id: str) -> int:
        return ActivityModel.objects.filter(user_id=user_id).count()

    def count_by_user_between(self, user_id: str, start: datetime, end: datetime) -> int:
        return ActivityModel.objects.filter(
            user_id=user_id,
            activity_date__gte=start,
            activity_date__lt=end,
        ).count()

    def delete_by_user(self, user_id: str) -> int:
        deleted_count, _ = ActivityModel.objects.filter(user_id=user_id).delete()
        return deleted_count


class DjangoDeclarationRepository(BaseRepository[DeclarationEntity, DeclarationModel]):
    """
    Implementação Django do DeclarationRepository.

    A numeração usa uma linha de SequenceModel travada com
    select_for_update; deve ser chamada dentro da transação do
    Unit of Work.
    """

    model_class = DeclarationModel
    mapper = DeclarationMapper
    default_order_field = "-submitted_at"

    def list_by_client(self, client_id: str) -> List[DeclarationEntity]:
        return self._to_entities(
            DeclarationModel.objects.filter(client_id=client_id).order_by("-submitted_at")
        )

    def list_by_status(self, status: DeclarationStatus) -> List[DeclarationEntity]:
        return self._to_entities(
            DeclarationModel.objects.filter(status=status.value).order_by("-submitted_at")
        )

    def count_by_client(self, client_id: str) -> int:
        return DeclarationModel.objects.filter(client_id=client_id).count()

    def count_by_client_and_status(self, client_id: str, status: DeclarationStatus) -> int:
        return DeclarationModel.objects.filter(client_id=client_id, status=status.value).count()

    def delete_by_client(self, client_id: str) -> int:
        deleted_count, _ = DeclarationModel.objects.filter(client_id=client_id).delete()
        return deleted_count

    def next_sequence(self) -> int:
        """
        Incrementa e retorna o contador de declarações.

        Na primeira chamada o contador parte do total de declarações
        já existentes.
        """
        sequence, created = SequenceModel.objects.select_for_update().get_or_create(
            name=DECLARATION_SEQUENCE,
            defaults={"value": DeclarationModel.objects.count()},
        )
        SequenceModel.objects.filter(name=DECLARATION_SEQUENCE).update(value=F("value") + 1)
        sequence.refresh_from_db()
        logger.debug(f"Sequência {DECLARATION_SEQUENCE} avançou para {sequence.value}")
        return sequence.value
