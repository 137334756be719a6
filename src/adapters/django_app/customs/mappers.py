"""
Mappers para conversão entre Entities (Core) e Models (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from decimal import Decimal
from typing import List, Optional

from src.core.users.entities import UnpEntity, UserEntity, UserRole
from src.core.vehicles.entities import VehicleEntity
from src.core.activities.entities import ActivityEntity
from src.core.declarations.entities import DeclarationEntity, DeclarationStatus

from .models import (
    ActivityModel,
    DeclarationModel,
    UnpModel,
    UserModel,
    VehicleModel,
)


class UnpMapper:
    """UnpModel → UnpEntity (a tabela é somente leitura)."""

    @staticmethod
    def to_entity(model: UnpModel) -> UnpEntity:
        return UnpEntity(id=model.id, unp=model.unp, company_name=model.company_name)


class UserMapper:
    """Conversão entre UserEntity e UserModel."""

    @staticmethod
    def to_model_fields(entity: UserEntity) -> dict:
        """
        Campos para update_or_create (sem o id).

        O UNP é referenciado pelo id do registro; o repositório
        resolve pelo valor quando o id não está carregado.
        """
        return {
            'username': entity.username,
            'password': entity.password,
            'role': entity.role.value,
            'name': entity.name,
            'email': entity.email,
            'activity_type': entity.activity_type,
            'unp_id': entity.unp.id if entity.unp else None,
            'verified': entity.verified,
            'created_at': entity.created_at,
        }

    @staticmethod
    def to_entity(model: UserModel) -> UserEntity:
        unp: Optional[UnpEntity] = None
        if model.unp_id is not None:
            unp = UnpMapper.to_entity(model.unp)

        return UserEntity(
            id=model.id,
            username=model.username,
            password=model.password,
            role=UserRole(model.role),
            name=model.name,
            email=model.email,
            activity_type=model.activity_type,
            unp=unp,
            verified=model.verified,
            created_at=model.created_at,
        )

    @staticmethod
    def to_entity_list(models) -> List[UserEntity]:
        return [UserMapper.to_entity(m) for m in models]


class VehicleMapper:
    """Conversão entre VehicleEntity e VehicleModel."""

    @staticmethod
    def to_model_fields(entity: VehicleEntity) -> dict:
        return {
            'license_plate': entity.license_plate,
            'model': entity.model,
            'vehicle_type': entity.vehicle_type,
            'year_of_manufacture': entity.year_of_manufacture,
            'capacity': entity.capacity,
            'client_id': entity.client_id,
            'created_at': entity.created_at,
            'updated_at': entity.updated_at,
        }

    @staticmethod
    def to_entity(model: VehicleModel) -> VehicleEntity:
        return VehicleEntity(
            id=model.id,
            license_plate=model.license_plate,
            model=model.model,
            vehicle_type=model.vehicle_type,
            year_of_manufacture=model.year_of_manufacture,
            capacity=model.capacity,
            client_id=model.client_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_entity_list(models) -> List[VehicleEntity]:
        return [VehicleMapper.to_entity(m) for m in models]


class ActivityMapper:
    """Conversão entre ActivityEntity e ActivityModel."""

    @staticmethod
    def to_model_fields(entity: ActivityEntity) -> dict:
        return {
            'user_id': entity.user_id,
            'description': entity.description,
            'activity_date': entity.activity_date,
        }

    @staticmethod
    def to_entity(model: ActivityModel) -> ActivityEntity:
        return ActivityEntity(
            id=model.id,
            user_id=model.user_id,
            description=model.description,
            activity_date=model.activity_date,
        )

    @staticmethod
    def to_entity_list(models) -> List[ActivityEntity]:
        return [ActivityMapper.to_entity(m) for m in models]


class DeclarationMapper:
    """Conversão entre DeclarationEntity e DeclarationModel."""

    @staticmethod
    def to_model_fields(entity: DeclarationEntity) -> dict:
        return {
            'declaration_number': entity.declaration_number,
            'client_id': entity.client_id,
            'declaration_type': entity.declaration_type,
            'tnved_code': entity.tnved_code,
            'product_description': entity.product_description,
            'product_value': entity.product_value,
            'net_weight': entity.net_weight,
            'quantity': entity.quantity,
            'country_of_origin': entity.country_of_origin,
            'country_of_destination': entity.country_of_destination,
            'customs_office': entity.customs_office,
            'status': entity.status.value,
            'submitted_at': entity.submitted_at,
            'reviewed_at': entity.reviewed_at,
        }

    @staticmethod
    def to_entity(model: DeclarationModel) -> DeclarationEntity:
        return DeclarationEntity(
            id=model.id,
            declaration_number=model.declaration_number,
            client_id=model.client_id,
            declaration_type=model.declaration_type,
            tnved_code=model.tnved_code,
            product_description=model.product_description,
            product_value=Decimal(model.product_value),
            net_weight=Decimal(model.net_weight),
            quantity=model.quantity,
            country_of_origin=model.country_of_origin,
            country_of_destination=model.country_of_destination,
            customs_office=model.customs_office,
            status=DeclarationStatus(model.status),
            submitted_at=model.submitted_at,
            reviewed_at=model.reviewed_at,
        )

    @staticmethod
    def to_entity_list(models) -> List[DeclarationEntity]:
        return [DeclarationMapper.to_entity(m) for m in models]
