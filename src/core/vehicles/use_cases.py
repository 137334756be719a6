"""
Use Cases (Application Services) do Domínio de Veículos.

Use Cases implementados:
- CriarVeiculoService
- ObterVeiculoService / ObterVeiculoPorPlacaService
- ListarVeiculosService (todos, por cliente ou por tipo)
- AtualizarVeiculoService (substituição completa)
- RemoverVeiculoService
- VerificarPlacaService
- EstatisticasVeiculosClienteService
"""

import logging
from typing import List, Optional

from src.core.shared.interfaces import Clock, SystemClock, UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.shared.validation import is_blank
from src.core.users.ports import UserRepository
from src.core.users.use_cases import obter_usuario_ou_falhar

from .entities import VehicleEntity
from .dtos import VeiculoInputDTO, VehicleOutputDTO, VehicleStatsDTO
from .ports import VehicleRepository

logger = logging.getLogger(__name__)


def _obter_veiculo_ou_falhar(vehicle_repo: VehicleRepository, vehicle_id: str) -> VehicleEntity:
    vehicle = vehicle_repo.get_by_id(vehicle_id)
    if not vehicle:
        raise EntityNotFoundError(
            f"Veículo {vehicle_id} não encontrado",
            entity_type="Vehicle",
            entity_id=vehicle_id,
        )
    return vehicle


class _VehicleOutputMixin:
    """Monta DTOs de saída resolvendo o nome do cliente."""

    user_repo: UserRepository

    def _to_output(self, vehicle: VehicleEntity) -> VehicleOutputDTO:
        client = self.user_repo.get_by_id(vehicle.client_id)
        return VehicleOutputDTO.from_entity(vehicle, client.name if client else None)

    def _to_output_list(self, vehicles: List[VehicleEntity]) -> List[VehicleOutputDTO]:
        names = {}
        result = []
        for vehicle in vehicles:
            if vehicle.client_id not in names:
                client = self.user_repo.get_by_id(vehicle.client_id)
                names[vehicle.client_id] = client.name if client else None
            result.append(VehicleOutputDTO.from_entity(vehicle, names[vehicle.client_id]))
        return result


class CriarVeiculoService(_VehicleOutputMixin):
    """
    Use Case: Cadastrar veículo.

    Fluxo:
    1. Cliente e placa obrigatórios
    2. Placa não pode existir
    3. Cliente precisa existir
    4. Persistir
    """

    def __init__(
        self,
        vehicle_repo: VehicleRepository,
        user_repo: UserRepository,
        uow: UnitOfWork,
        clock: Optional[Clock] = None,
    ):
        self.vehicle_repo = vehicle_repo
        self.user_repo = user_repo
        self.uow = uow
        self.clock = clock or SystemClock()

    def execute(self, input_dto: VeiculoInputDTO) -> VehicleOutputDTO:
        if is_blank(input_dto.client_id):
            raise ValidationError("Cliente é obrigatório", field="client_id")
        if is_blank(input_dto.license_plate):
            raise ValidationError("Placa é obrigatória", field="license_plate")

        with self.uow:
            plate = input_dto.license_plate.strip()
            if self.vehicle_repo.exists_by_license_plate(plate):
                raise ValidationError(
                    f"Já existe veículo com a placa {plate}",
                    field="license_plate",
                )
            obter_usuario_ou_falhar(self.user_repo, input_dto.client_id)

            vehicle = VehicleEntity.criar(
                license_plate=plate,
                client_id=input_dto.client_id,
                model=input_dto.model,
                vehicle_type=input_dto.vehicle_type,
                year_of_manufacture=input_dto.year_of_manufacture,
                capacity=input_dto.capacity,
                agora=self.clock.now(),
            )
            self.vehicle_repo.save(vehicle)

        logger.info(f"Veículo criado: {vehicle.id} ({vehicle.license_plate})")
        return self._to_output(vehicle)


class ObterVeiculoService(_VehicleOutputMixin):
    """Use Case: Obter veículo por ID."""

    def __init__(self, vehicle_repo: VehicleRepository, user_repo: UserRepository):
        self.vehicle_repo = vehicle_repo
        self.user_repo = user_repo

    def execute(self, vehicle_id: str) -> VehicleOutputDTO:
        return self._to_output(_obter_veiculo_ou_falhar(self.vehicle_repo, vehicle_id))


class ObterVeiculoPorPlacaService(_VehicleOutputMixin):
    """Use Case: Obter veículo pela placa."""

    def __init__(self, vehicle_repo: VehicleRepository, user_repo: UserRepository):
        self.vehicle_repo = vehicle_repo
        self.user_repo = user_repo

    def execute(self, license_plate: str) -> VehicleOutputDTO:
        vehicle = self.vehicle_repo.get_by_license_plate(license_plate)
        if not vehicle:
            raise EntityNotFoundError(
                f"Veículo com placa {license_plate} não encontrado",
                entity_type="Vehicle",
                entity_id=license_plate,
            )
        return self._to_output(vehicle)


class ListarVeiculosService(_VehicleOutputMixin):
    """
    Use Case: Listar veículos.

    Filtros (mutuamente exclusivos, nessa prioridade):
    - client_id: veículos do cliente
    - vehicle_type: tipo contém o termo (case-insensitive)
    """

    def __init__(self, vehicle_repo: VehicleRepository, user_repo: UserRepository):
        self.vehicle_repo = vehicle_repo
        self.user_repo = user_repo

    def execute(
        self,
        client_id: Optional[str] = None,
        vehicle_type: Optional[str] = None,
    ) -> List[VehicleOutputDTO]:
        if client_id:
            vehicles = self.vehicle_repo.list_by_client(client_id)
        elif vehicle_type:
            vehicles = self.vehicle_repo.list_by_type(vehicle_type)
        else:
            vehicles = self.vehicle_repo.list_all()
        return self._to_output_list(vehicles)


class AtualizarVeiculoService(_VehicleOutputMixin):
    """
    Use Case: Atualizar veículo.

    Substitui todos os campos mutáveis. A unicidade da placa só é
    verificada quando a placa muda.
    """

    def __init__(
        self,
        vehicle_repo: VehicleRepository,
        user_repo: UserRepository,
        uow: UnitOfWork,
        clock: Optional[Clock] = None,
    ):
        self.vehicle_repo = vehicle_repo
        self.user_repo = user_repo
        self.uow = uow
        self.clock = clock or SystemClock()

    def execute(self, vehicle_id: str, input_dto: VeiculoInputDTO) -> VehicleOutputDTO:
        with self.uow:
            vehicle = _obter_veiculo_ou_falhar(self.vehicle_repo, vehicle_id)

            if is_blank(input_dto.license_plate):
                raise ValidationError("Placa é obrigatória", field="license_plate")

            plate = input_dto.license_plate.strip()
            if plate != vehicle.license_plate and self.vehicle_repo.exists_by_license_plate(plate):
                raise ValidationError(
                    f"Já existe veículo com a placa {plate}",
                    field="license_plate",
                )

            vehicle.atualizar(
                license_plate=plate,
                model=input_dto.model,
                vehicle_type=input_dto.vehicle_type,
                year_of_manufacture=input_dto.year_of_manufacture,
                capacity=input_dto.capacity,
                agora=self.clock.now(),
            )
            self.vehicle_repo.save(vehicle)

        logger.info(f"Veículo atualizado: {vehicle_id}")
        return self._to_output(vehicle)


class RemoverVeiculoService:
    """Use Case: Remover veículo."""

    def __init__(self, vehicle_repo: VehicleRepository, uow: UnitOfWork):
        self.vehicle_repo = vehicle_repo
        self.uow = uow

    def execute(self, vehicle_id: str) -> None:
        with self.uow:
            _obter_veiculo_ou_falhar(self.vehicle_repo, vehicle_id)
            self.vehicle_repo.delete(vehicle_id)
        logger.info(f"Veículo removido: {vehicle_id}")


class VerificarPlacaService:
    """Use Case: Verificar se placa já está cadastrada."""

    def __init__(self, vehicle_repo: VehicleRepository):
        self.vehicle_repo = vehicle_repo

    def execute(self, license_plate: str) -> bool:
        return self.vehicle_repo.exists_by_license_plate(license_plate)


class EstatisticasVeiculosClienteService:
    """
    Use Case: Estatísticas de frota de um cliente.

    Retorna total de veículos, quantidade de caminhões
    e soma das capacidades (ausentes contam como 0).
    """

    def __init__(self, vehicle_repo: VehicleRepository, user_repo: UserRepository):
        self.vehicle_repo = vehicle_repo
        self.user_repo = user_repo

    def execute(self, client_id: str) -> VehicleStatsDTO:
        obter_usuario_ou_falhar(self.user_repo, client_id)
        vehicles = self.vehicle_repo.list_by_client(client_id)

        return VehicleStatsDTO(
            total_vehicles=len(vehicles),
            trucks_count=sum(1 for v in vehicles if v.is_truck),
            total_capacity=float(sum(v.capacity or 0 for v in vehicles)),
        )
