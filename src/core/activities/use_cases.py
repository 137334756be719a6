"""
Use Cases (Application Services) do Domínio de Atividades.

Use Cases implementados:
- CriarAtividadeService / CriarAtividadeParaUsernameService
- ObterAtividadeService
- ListarAtividadesService (todas ou por usuário)
- ListarAtividadesRecentesService
- ListarAtividadesPaginadasService
- ListarAtividadesPorPeriodoService (global ou por usuário)
- BuscarAtividadesService (palavra-chave)
- AtualizarAtividadeService
- RemoverAtividadeService / RemoverAtividadesUsuarioService
- EstatisticasAtividadesUsuarioService
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from src.core.shared.interfaces import Clock, SystemClock, UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.shared.pagination import PaginatedResultDTO
from src.core.shared.validation import is_blank
from src.core.users.ports import UserRepository
from src.core.users.use_cases import obter_usuario_ou_falhar

from .entities import ActivityEntity
from .dtos import (
    ActivityOutputDTO,
    ActivityStatsDTO,
    AtualizarAtividadeInputDTO,
    CriarAtividadeInputDTO,
)
from .ports import ActivityRepository

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 5
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


class _ActivityOutputMixin:
    """Monta DTOs de saída resolvendo o username do dono."""

    user_repo: UserRepository

    def _to_output(self, activity: ActivityEntity) -> ActivityOutputDTO:
        user = self.user_repo.get_by_id(activity.user_id)
        return ActivityOutputDTO.from_entity(activity, user.username if user else None)

    def _to_output_list(self, activities: List[ActivityEntity]) -> List[ActivityOutputDTO]:
        names = {}
        result = []
        for activity in activities:
            if activity.user_id not in names:
                user = self.user_repo.get_by_id(activity.user_id)
                names[activity.user_id] = user.username if user else None
            result.append(ActivityOutputDTO.from_entity(activity, names[activity.user_id]))
        return result


def _obter_atividade_ou_falhar(activity_repo: ActivityRepository, activity_id: str) -> ActivityEntity:
    activity = activity_repo.get_by_id(activity_id)
    if not activity:
        raise EntityNotFoundError(
            f"Atividade {activity_id} não encontrada",
            entity_type="Activity",
            entity_id=activity_id,
        )
    return activity


def _validar_periodo(start: Optional[datetime], end: Optional[datetime]) -> None:
    if start is None or end is None:
        raise ValidationError(
            "Informe data inicial e final",
            field="start_date" if start is None else "end_date",
        )
    if start > end:
        raise ValidationError(
            "Data inicial deve ser anterior à data final",
            field="start_date",
        )


class CriarAtividadeService(_ActivityOutputMixin):
    """
    Use Case: Registrar atividade para um usuário (por ID).

    activity_date ausente assume o instante atual do relógio injetado.
    """

    def __init__(
        self,
        activity_repo: ActivityRepository,
        user_repo: UserRepository,
        uow: UnitOfWork,
        clock: Optional[Clock] = None,
    ):
        self.activity_repo = activity_repo
        self.user_repo = user_repo
        self.uow = uow
        self.clock = clock or SystemClock()

    def execute(self, input_dto: CriarAtividadeInputDTO) -> ActivityOutputDTO:
        if is_blank(input_dto.user_id):
            raise ValidationError("Usuário é obrigatório", field="user_id")

        with self.uow:
            user = obter_usuario_ou_falhar(self.user_repo, input_dto.user_id)
            activity = ActivityEntity.criar(
                user_id=user.id,
                description=input_dto.description,
                activity_date=input_dto.activity_date,
                agora=self.clock.now(),
            )
            self.activity_repo.save(activity)

        logger.info(f"Atividade registrada: {activity.id} (usuário {user.id})")
        return ActivityOutputDTO.from_entity(activity, user.username)


class CriarAtividadeParaUsernameService:
    """Use Case: Registrar atividade para um usuário identificado pelo username."""

    def __init__(
        self,
        activity_repo: ActivityRepository,
        user_repo: UserRepository,
        uow: UnitOfWork,
        clock: Optional[Clock] = None,
    ):
        self.activity_repo = activity_repo
        self.user_repo = user_repo
        self.uow = uow
        self.clock = clock or SystemClock()

    def execute(self, username: str, description: str) -> ActivityOutputDTO:
        with self.uow:
            user = self.user_repo.get_by_username(username)
            if not user:
                raise EntityNotFoundError(
                    f"Usuário '{username}' não encontrado",
                    entity_type="User",
                    entity_id=username,
                )
            activity = ActivityEntity.criar(
                user_id=user.id,
                description=description,
                agora=self.clock.now(),
            )
            self.activity_repo.save(activity)

        logger.info(f"Atividade registrada para {username}: {activity.id}")
        return ActivityOutputDTO.from_entity(activity, user.username)


class ObterAtividadeService(_ActivityOutputMixin):
    """Use Case: Obter atividade por ID."""

    def __init__(self, activity_repo: ActivityRepository, user_repo: UserRepository):
        self.activity_repo = activity_repo
        self.user_repo = user_repo

    def execute(self, activity_id: str) -> ActivityOutputDTO:
        return self._to_output(_obter_atividade_ou_falhar(self.activity_repo, activity_id))


class ListarAtividadesService(_ActivityOutputMixin):
    """Use Case: Listar atividades (todas ou de um usuário)."""

    def __init__(self, activity_repo: ActivityRepository, user_repo: UserRepository):
        self.activity_repo = activity_repo
        self.user_repo = user_repo

    def execute(self, user_id: Optional[str] = None) -> List[ActivityOutputDTO]:
        if user_id:
            obter_usuario_ou_falhar(self.user_repo, user_id)
            activities = self.activity_repo.list_by_user(user_id)
        else:
            activities = self.activity_repo.list_all()
        return self._to_output_list(activities)


class ListarAtividadesRecentesService(_ActivityOutputMixin):
    """Use Case: Últimas N atividades de um usuário (default 5)."""

    def __init__(self, activity_repo: ActivityRepository, user_repo: UserRepository):
        self.activity_repo = activity_repo
        self.user_repo = user_repo

    def execute(self, user_id: str, limit: int = DEFAULT_RECENT_LIMIT) -> List[ActivityOutputDTO]:
        if limit < 1:
            raise ValidationError("limit deve ser maior que zero", field="limit")
        obter_usuario_ou_falhar(self.user_repo, user_id)
        return self._to_output_list(self.activity_repo.list_recent_by_user(user_id, limit))


class ListarAtividadesPaginadasService(_ActivityOutputMixin):
    """
    Use Case: Atividades de um usuário, paginadas.

    Páginas começam em 1; por_pagina limitado a 100.
    """

    def __init__(self, activity_repo: ActivityRepository, user_repo: UserRepository):
        self.activity_repo = activity_repo
        self.user_repo = user_repo

    def execute(
        self,
        user_id: str,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> PaginatedResultDTO:
        if page < 1:
            raise ValidationError("page deve ser maior ou igual a 1", field="page")
        if per_page < 1 or per_page > MAX_PER_PAGE:
            raise ValidationError(
                f"per_page deve estar entre 1 e {MAX_PER_PAGE}",
                field="per_page",
            )
        obter_usuario_ou_falhar(self.user_repo, user_id)

        items, total = self.activity_repo.list_by_user_paginated(user_id, page, per_page)
        return PaginatedResultDTO(
            items=self._to_output_list(items),
            total=total,
            page=page,
            per_page=per_page,
        )


class ListarAtividadesPorPeriodoService(_ActivityOutputMixin):
    """Use Case: Atividades num intervalo de datas (inclusivo), global ou por usuário."""

    def __init__(self, activity_repo: ActivityRepository, user_repo: UserRepository):
        self.activity_repo = activity_repo
        self.user_repo = user_repo

    def execute(
        self,
        start: Optional[datetime],
        end: Optional[datetime],
        user_id: Optional[str] = None,
    ) -> List[ActivityOutputDTO]:
        _validar_periodo(start, end)
        if user_id:
            obter_usuario_ou_falhar(self.user_repo, user_id)
            activities = self.activity_repo.list_by_user_between(user_id, start, end)
        else:
            activities = self.activity_repo.list_between(start, end)
        return self._to_output_list(activities)


class BuscarAtividadesService(_ActivityOutputMixin):
    """Use Case: Busca por palavra-chave na descrição das atividades do usuário."""

    def __init__(self, activity_repo: ActivityRepository, user_repo: UserRepository):
        self.activity_repo = activity_repo
        self.user_repo = user_repo

    def execute(self, user_id: str, keyword: Optional[str]) -> List[ActivityOutputDTO]:
        if is_blank(keyword):
            raise ValidationError("Palavra-chave é obrigatória", field="keyword")
        obter_usuario_ou_falhar(self.user_repo, user_id)
        return self._to_output_list(self.activity_repo.search_by_user(user_id, keyword.strip()))


class AtualizarAtividadeService(_ActivityOutputMixin):
    """Use Case: Atualizar descrição (e opcionalmente a data) da atividade."""

    def __init__(
        self,
        activity_repo: ActivityRepository,
        user_repo: UserRepository,
        uow: UnitOfWork,
    ):
        self.activity_repo = activity_repo
        self.user_repo = user_repo
        self.uow = uow

    def execute(self, activity_id: str, input_dto: AtualizarAtividadeInputDTO) -> ActivityOutputDTO:
        with self.uow:
            activity = _obter_atividade_ou_falhar(self.activity_repo, activity_id)
            activity.atualizar(input_dto.description, input_dto.activity_date)
            self.activity_repo.save(activity)

        logger.info(f"Atividade atualizada: {activity_id}")
        return self._to_output(activity)


class RemoverAtividadeService:
    """Use Case: Remover atividade."""

    def __init__(self, activity_repo: ActivityRepository, uow: UnitOfWork):
        self.activity_repo = activity_repo
        self.uow = uow

    def execute(self, activity_id: str) -> None:
        with self.uow:
            _obter_atividade_ou_falhar(self.activity_repo, activity_id)
            self.activity_repo.delete(activity_id)
        logger.info(f"Atividade removida: {activity_id}")


class RemoverAtividadesUsuarioService:
    """Use Case: Remover todas as atividades de um usuário."""

    def __init__(
        self,
        activity_repo: ActivityRepository,
        user_repo: UserRepository,
        uow: UnitOfWork,
    ):
        self.activity_repo = activity_repo
        self.user_repo = user_repo
        self.uow = uow

    def execute(self, user_id: str) -> int:
        """
        Returns:
            Quantidade de atividades removidas
        """
        with self.uow:
            obter_usuario_ou_falhar(self.user_repo, user_id)
            removed = self.activity_repo.delete_by_user(user_id)
        logger.info(f"{removed} atividades removidas do usuário {user_id}")
        return removed


class EstatisticasAtividadesUsuarioService:
    """
    Use Case: Estatísticas de atividades de um usuário.

    "Hoje" é o dia corrente segundo o relógio injetado.
    """

    def __init__(
        self,
        activity_repo: ActivityRepository,
        user_repo: UserRepository,
        clock: Optional[Clock] = None,
    ):
        self.activity_repo = activity_repo
        self.user_repo = user_repo
        self.clock = clock or SystemClock()

    def execute(self, user_id: str) -> ActivityStatsDTO:
        obter_usuario_ou_falhar(self.user_repo, user_id)

        start_of_day = self.clock.now().replace(hour=0, minute=0, second=0, microsecond=0)
        end_of_day = start_of_day + timedelta(days=1)

        return ActivityStatsDTO(
            total_activities=self.activity_repo.count_by_user(user_id),
            today_activities=self.activity_repo.count_by_user_between(
                user_id, start_of_day, end_of_day
            ),
        )
