"""
Use Cases (Application Services) do Domínio de Declarações.

Use Cases implementados:
- CriarDeclaracaoService: cria declaração PENDING com número sequencial
- ObterDeclaracaoService
- ListarDeclaracoesService (todas, por cliente ou por status)
- AtualizarDeclaracaoService (somente PENDING)
- AlterarStatusDeclaracaoService (PENDING → APPROVED | REJECTED)
- RemoverDeclaracaoService (somente PENDING)
- EstatisticasDeclaracoesClienteService
"""

import logging
from typing import List, Optional

from src.core.shared.interfaces import Clock, SystemClock, UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.shared.validation import is_blank
from src.core.users.ports import UserRepository
from src.core.users.use_cases import obter_usuario_ou_falhar

from .entities import DeclarationEntity, DeclarationStatus
from .dtos import DeclaracaoInputDTO, DeclarationOutputDTO, DeclarationStatsDTO
from .ports import DeclarationRepository

logger = logging.getLogger(__name__)

DEFAULT_NUMBER_PREFIX = "TD"


def formatar_numero_declaracao(prefix: str, year: int, sequence: int) -> str:
    """
    Example:
        formatar_numero_declaracao("TD", 2024, 7)  # "TD-2024-00007"
    """
    return f"{prefix}-{year}-{sequence:05d}"


def _obter_declaracao_ou_falhar(repo: DeclarationRepository, declaration_id: str) -> DeclarationEntity:
    declaration = repo.get_by_id(declaration_id)
    if not declaration:
        raise EntityNotFoundError(
            f"Declaração {declaration_id} não encontrada",
            entity_type="Declaration",
            entity_id=declaration_id,
        )
    return declaration


def _parse_status(value: Optional[str]) -> DeclarationStatus:
    if is_blank(value):
        raise ValidationError("Status é obrigatório", field="status")
    try:
        return DeclarationStatus.from_string(value)
    except ValueError as e:
        raise ValidationError(str(e), field="status")


class _DeclarationOutputMixin:
    """Monta DTOs de saída resolvendo o nome do cliente."""

    user_repo: UserRepository

    def _to_output(self, declaration: DeclarationEntity) -> DeclarationOutputDTO:
        client = self.user_repo.get_by_id(declaration.client_id)
        return DeclarationOutputDTO.from_entity(declaration, client.name if client else None)

    def _to_output_list(self, declarations: List[DeclarationEntity]) -> List[DeclarationOutputDTO]:
        names = {}
        result = []
        for declaration in declarations:
            if declaration.client_id not in names:
                client = self.user_repo.get_by_id(declaration.client_id)
                names[declaration.client_id] = client.name if client else None
            result.append(
                DeclarationOutputDTO.from_entity(declaration, names[declaration.client_id])
            )
        return result


class CriarDeclaracaoService(_DeclarationOutputMixin):
    """
    Use Case: Criar declaração aduaneira.

    Fluxo:
    1. Validar campos obrigatórios e valor não-negativo
    2. Verificar cliente
    3. Reservar número na sequência serializada
    4. Criar entidade PENDING (valor/peso/quantidade default 0)
    5. Persistir

    Example:
        service = CriarDeclaracaoService(declaration_repo, user_repo, uow, clock)
        output = service.execute(DeclaracaoInputDTO(
            client_id=client.id,
            declaration_type="IMPORT",
            product_description="Peças automotivas",
        ))
        output.declaration_number  # "TD-2024-00001"
    """

    def __init__(
        self,
        declaration_repo: DeclarationRepository,
        user_repo: UserRepository,
        uow: UnitOfWork,
        clock: Optional[Clock] = None,
        number_prefix: str = DEFAULT_NUMBER_PREFIX,
    ):
        self.declaration_repo = declaration_repo
        self.user_repo = user_repo
        self.uow = uow
        self.clock = clock or SystemClock()
        self.number_prefix = number_prefix or DEFAULT_NUMBER_PREFIX

    def execute(self, input_dto: DeclaracaoInputDTO) -> DeclarationOutputDTO:
        if is_blank(input_dto.client_id):
            raise ValidationError("Cliente é obrigatório", field="client_id")
        DeclarationEntity.validar_campos(
            input_dto.declaration_type,
            input_dto.product_description,
            input_dto.product_value,
        )

        with self.uow:
            client = obter_usuario_ou_falhar(self.user_repo, input_dto.client_id)

            agora = self.clock.now()
            number = formatar_numero_declaracao(
                self.number_prefix, agora.year, self.declaration_repo.next_sequence()
            )

            declaration = DeclarationEntity.criar(
                declaration_number=number,
                client_id=client.id,
                declaration_type=input_dto.declaration_type,
                product_description=input_dto.product_description,
                tnved_code=input_dto.tnved_code,
                product_value=input_dto.product_value,
                net_weight=input_dto.net_weight,
                quantity=input_dto.quantity,
                country_of_origin=input_dto.country_of_origin,
                country_of_destination=input_dto.country_of_destination,
                customs_office=input_dto.customs_office,
                agora=agora,
            )
            self.declaration_repo.save(declaration)

        logger.info(f"Declaração criada: {declaration.declaration_number} (cliente {client.id})")
        return DeclarationOutputDTO.from_entity(declaration, client.name)


class ObterDeclaracaoService(_DeclarationOutputMixin):
    """Use Case: Obter declaração por ID."""

    def __init__(self, declaration_repo: DeclarationRepository, user_repo: UserRepository):
        self.declaration_repo = declaration_repo
        self.user_repo = user_repo

    def execute(self, declaration_id: str) -> DeclarationOutputDTO:
        return self._to_output(
            _obter_declaracao_ou_falhar(self.declaration_repo, declaration_id)
        )


class ListarDeclaracoesService(_DeclarationOutputMixin):
    """
    Use Case: Listar declarações.

    Filtros: client_id (prioritário) ou status.
    """

    def __init__(self, declaration_repo: DeclarationRepository, user_repo: UserRepository):
        self.declaration_repo = declaration_repo
        self.user_repo = user_repo

    def execute(
        self,
        client_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[DeclarationOutputDTO]:
        if client_id:
            declarations = self.declaration_repo.list_by_client(client_id)
        elif status:
            declarations = self.declaration_repo.list_by_status(_parse_status(status))
        else:
            declarations = self.declaration_repo.list_all()
        return self._to_output_list(declarations)


class AtualizarDeclaracaoService(_DeclarationOutputMixin):
    """
    Use Case: Atualizar declaração.

    Permitido apenas enquanto PENDING.
    """

    def __init__(
        self,
        declaration_repo: DeclarationRepository,
        user_repo: UserRepository,
        uow: UnitOfWork,
    ):
        self.declaration_repo = declaration_repo
        self.user_repo = user_repo
        self.uow = uow

    def execute(self, declaration_id: str, input_dto: DeclaracaoInputDTO) -> DeclarationOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se declaração não existe
            BusinessRuleViolationError: Se declaração já revisada
            ValidationError: Se dados inválidos
        """
        with self.uow:
            declaration = _obter_declaracao_ou_falhar(self.declaration_repo, declaration_id)
            declaration.atualizar_dados(
                declaration_type=input_dto.declaration_type,
                product_description=input_dto.product_description,
                tnved_code=input_dto.tnved_code,
                product_value=input_dto.product_value,
                net_weight=input_dto.net_weight,
                quantity=input_dto.quantity,
                country_of_origin=input_dto.country_of_origin,
                country_of_destination=input_dto.country_of_destination,
                customs_office=input_dto.customs_office,
            )
            self.declaration_repo.save(declaration)

        logger.info(f"Declaração atualizada: {declaration.declaration_number}")
        return self._to_output(declaration)


class AlterarStatusDeclaracaoService(_DeclarationOutputMixin):
    """
    Use Case: Revisar declaração (aprovar ou rejeitar).

    Registra reviewed_at com o relógio injetado.
    """

    def __init__(
        self,
        declaration_repo: DeclarationRepository,
        user_repo: UserRepository,
        uow: UnitOfWork,
        clock: Optional[Clock] = None,
    ):
        self.declaration_repo = declaration_repo
        self.user_repo = user_repo
        self.uow = uow
        self.clock = clock or SystemClock()

    def execute(self, declaration_id: str, status: Optional[str]) -> DeclarationOutputDTO:
        novo_status = _parse_status(status)

        with self.uow:
            declaration = _obter_declaracao_ou_falhar(self.declaration_repo, declaration_id)
            declaration.revisar(novo_status, self.clock.now())
            self.declaration_repo.save(declaration)

        logger.info(
            f"Declaração {declaration.declaration_number} revisada: {novo_status.value}"
        )
        return self._to_output(declaration)


class RemoverDeclaracaoService:
    """Use Case: Remover declaração (somente PENDING)."""

    def __init__(self, declaration_repo: DeclarationRepository, uow: UnitOfWork):
        self.declaration_repo = declaration_repo
        self.uow = uow

    def execute(self, declaration_id: str) -> None:
        with self.uow:
            declaration = _obter_declaracao_ou_falhar(self.declaration_repo, declaration_id)
            declaration.garantir_editavel("removida")
            self.declaration_repo.delete(declaration_id)
        logger.info(f"Declaração removida: {declaration.declaration_number}")


class EstatisticasDeclaracoesClienteService:
    """Use Case: Contagem de declarações do cliente, total e por status."""

    def __init__(self, declaration_repo: DeclarationRepository, user_repo: UserRepository):
        self.declaration_repo = declaration_repo
        self.user_repo = user_repo

    def execute(self, client_id: str) -> DeclarationStatsDTO:
        obter_usuario_ou_falhar(self.user_repo, client_id)
        return DeclarationStatsDTO(
            total_declarations=self.declaration_repo.count_by_client(client_id),
            by_status={
                status.value: self.declaration_repo.count_by_client_and_status(client_id, status)
                for status in DeclarationStatus
            },
        )
