"""
Use Cases (Application Services) do Domínio de Usuários.

Use Cases implementados:
- RegistrarUsuarioService: Cadastro de cliente ou motorista
- ObterUsuarioService: Obtém usuário por ID
- ObterUsuarioPorUsernameService: Obtém usuário por username
- ListarUsuariosService: Lista usuários (filtro opcional por papel)
- AtualizarUsuarioService: Atualização parcial de dados de contato
- RemoverUsuarioService: Remove usuário e seus dependentes
- VerificarUsernameService: Verifica se username já existe

Dependências (hash de senha, relógio, verificador de UNP) são
injetadas explicitamente pelo container.
"""

import logging
from typing import List, Optional

from src.core.shared.interfaces import Clock, PasswordHasher, SystemClock, UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.shared.validation import is_blank
from src.core.vehicles.ports import VehicleRepository
from src.core.activities.ports import ActivityRepository
from src.core.declarations.ports import DeclarationRepository

from .entities import UserEntity, UserRole
from .dtos import AtualizarUsuarioInputDTO, RegistrarUsuarioInputDTO, UserOutputDTO
from .ports import UnpRepository, UserRepository
from .validation import unp_tem_formato_valido, validar_entrada_registro
from .verification import UnpVerificationService

logger = logging.getLogger(__name__)


def obter_usuario_ou_falhar(user_repo: UserRepository, user_id: str) -> UserEntity:
    """
    Busca usuário ou lança EntityNotFoundError.

    Usado também pelos domínios que referenciam usuários.
    """
    user = user_repo.get_by_id(user_id) if user_id else None
    if not user:
        raise EntityNotFoundError(
            f"Usuário {user_id} não encontrado",
            entity_type="User",
            entity_id=user_id,
        )
    return user


class RegistrarUsuarioService:
    """
    Use Case: Cadastrar usuário (auto-registro).

    Fluxo:
    1. Validar formato da entrada (lista de erros)
    2. Recusar papel ADMIN
    3. Validar regras de negócio (username, UNP, nome da empresa)
    4. Gerar hash da senha
    5. CLIENT: verificar UNP e vincular registro; DRIVER: limpar dados de empresa
    6. Persistir e retornar DTO sem senha

    Example:
        service = RegistrarUsuarioService(
            user_repo, unp_repo, password_hasher, unp_verifier, uow
        )
        output = service.execute(RegistrarUsuarioInputDTO(
            username="acme1", password="s3cret", role="CLIENT",
            name="ACME Ltda", unp="123456789",
        ))
    """

    def __init__(
        self,
        user_repo: UserRepository,
        unp_repo: UnpRepository,
        password_hasher: PasswordHasher,
        unp_verifier: UnpVerificationService,
        uow: UnitOfWork,
        clock: Optional[Clock] = None,
    ):
        self.user_repo = user_repo
        self.unp_repo = unp_repo
        self.password_hasher = password_hasher
        self.unp_verifier = unp_verifier
        self.uow = uow
        self.clock = clock or SystemClock()

    def execute(self, input_dto: RegistrarUsuarioInputDTO) -> UserOutputDTO:
        """
        Executa cadastro em transação atômica.

        Raises:
            FieldValidationError: Se campos obrigatórios ausentes/inválidos
            ValidationError: Se regra de cadastro violada
        """
        validar_entrada_registro(input_dto).raise_if_invalid()
        role = UserRole.from_string(input_dto.role)

        if role == UserRole.ADMIN:
            raise ValidationError(
                "Administradores não podem se cadastrar pelo registro público",
                field="role",
            )

        with self.uow:
            self._validar_regras(input_dto, role)

            user = UserEntity(
                username=input_dto.username.strip(),
                password=self.password_hasher.hash(input_dto.password),
                role=role,
                name=input_dto.name,
                email=input_dto.email,
                activity_type=input_dto.activity_type,
                verified=True,
                created_at=self.clock.now(),
            )

            if role == UserRole.CLIENT:
                verified = self.unp_verifier.verify_unp(input_dto.unp)
                unp = self.unp_repo.get_by_value(input_dto.unp)
                if not unp:
                    raise ValidationError(
                        f"UNP {input_dto.unp} não encontrado",
                        field="unp",
                    )
                user.vincular_unp(unp, verified)
            else:
                user.limpar_dados_empresa()

            self.user_repo.save(user)

        logger.info(f"Usuário cadastrado: {user.username} ({user.role.value})")
        return UserOutputDTO.from_entity(user)

    def _validar_regras(self, dto: RegistrarUsuarioInputDTO, role: UserRole) -> None:
        """Regras de negócio do cadastro; para no primeiro erro."""
        if self.user_repo.exists_by_username(dto.username.strip()):
            raise ValidationError(
                f"Username '{dto.username}' já está em uso",
                field="username",
            )

        if role == UserRole.CLIENT:
            if is_blank(dto.unp):
                raise ValidationError("UNP é obrigatório para clientes", field="unp")
            if not unp_tem_formato_valido(dto.unp):
                raise ValidationError("UNP deve ter exatamente 9 dígitos", field="unp")
            if not self.unp_repo.exists(dto.unp):
                raise ValidationError(
                    f"UNP {dto.unp} não existe na base de referência",
                    field="unp",
                )
            if self.user_repo.exists_by_unp(dto.unp):
                raise ValidationError(
                    f"UNP {dto.unp} já está vinculado a outro usuário",
                    field="unp",
                )
            if is_blank(dto.name):
                raise ValidationError(
                    "Nome da empresa é obrigatório para clientes",
                    field="name",
                )

        elif role == UserRole.DRIVER:
            if not is_blank(dto.name):
                raise ValidationError(
                    "Motoristas não devem informar nome de empresa",
                    field="name",
                )


class ObterUsuarioService:
    """Use Case: Obter usuário por ID."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def execute(self, user_id: str) -> UserOutputDTO:
        return UserOutputDTO.from_entity(obter_usuario_ou_falhar(self.user_repo, user_id))


class ObterUsuarioPorUsernameService:
    """Use Case: Obter usuário por username."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def execute(self, username: str) -> UserOutputDTO:
        user = self.user_repo.get_by_username(username)
        if not user:
            raise EntityNotFoundError(
                f"Usuário '{username}' não encontrado",
                entity_type="User",
                entity_id=username,
            )
        return UserOutputDTO.from_entity(user)


class ListarUsuariosService:
    """
    Use Case: Listar usuários.

    Filtro opcional por papel (CLIENT, DRIVER, ADMIN).
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def execute(self, role: Optional[str] = None) -> List[UserOutputDTO]:
        if role:
            try:
                role_enum = UserRole.from_string(role)
            except ValueError as e:
                raise ValidationError(str(e), field="role")
            users = self.user_repo.list_by_role(role_enum)
        else:
            users = self.user_repo.list_all()

        return [UserOutputDTO.from_entity(u) for u in users]


class AtualizarUsuarioService:
    """
    Use Case: Atualizar dados de contato do usuário.

    Atualização parcial: apenas email, name e activity_type,
    e apenas quando informados.
    """

    def __init__(self, user_repo: UserRepository, uow: UnitOfWork):
        self.user_repo = user_repo
        self.uow = uow

    def execute(self, user_id: str, input_dto: AtualizarUsuarioInputDTO) -> UserOutputDTO:
        with self.uow:
            user = obter_usuario_ou_falhar(self.user_repo, user_id)
            user.atualizar_dados(
                email=input_dto.email,
                name=input_dto.name,
                activity_type=input_dto.activity_type,
            )
            self.user_repo.save(user)

        logger.info(f"Usuário atualizado: {user_id}")
        return UserOutputDTO.from_entity(user)


class RemoverUsuarioService:
    """
    Use Case: Remover usuário.

    Remove explicitamente, na mesma transação, as atividades,
    veículos e declarações do usuário antes de removê-lo.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        vehicle_repo: VehicleRepository,
        activity_repo: ActivityRepository,
        declaration_repo: DeclarationRepository,
        uow: UnitOfWork,
    ):
        self.user_repo = user_repo
        self.vehicle_repo = vehicle_repo
        self.activity_repo = activity_repo
        self.declaration_repo = declaration_repo
        self.uow = uow

    def execute(self, user_id: str) -> None:
        with self.uow:
            obter_usuario_ou_falhar(self.user_repo, user_id)

            activities = self.activity_repo.delete_by_user(user_id)
            vehicles = self.vehicle_repo.delete_by_client(user_id)
            declarations = self.declaration_repo.delete_by_client(user_id)
            self.user_repo.delete(user_id)

        logger.info(
            f"Usuário removido: {user_id} "
            f"(atividades={activities}, veículos={vehicles}, declarações={declarations})"
        )


class VerificarUsernameService:
    """Use Case: Verificar se username já existe."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def execute(self, username: str) -> bool:
        return self.user_repo.exists_by_username(username)
