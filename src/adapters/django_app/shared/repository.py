"""
Base dos repositórios Django do back office.

Cada repositório concreto (usuários, veículos, atividades, declarações)
herda daqui o upsert por id, a busca, a remoção, a contagem e a paginação
por offset. Violação de UNIQUE/OneToOne ou de tamanho de coluna no banco
vira ValidationError.
Regras de negócio ficam nos casos de uso.
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar
import logging

from django.db import DataError, IntegrityError, models, transaction
from django.db.models import QuerySet

from src.core.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=models.Model)


@dataclass
class PaginationParams:
    """Parâmetros de paginação (página 1-indexed)."""
    page: int = 1
    per_page: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


class BaseRepository(Generic[T, M]):
    """
    Classe base para repositórios Django.

    Subclasses definem model_class, mapper e, opcionalmente,
    select_related_fields e default_order_field.

    O mapper deve expor:
    - to_entity(model) -> entity
    - to_model_fields(entity) -> dict (sem o id)

    Example:
        class DjangoVehicleRepository(BaseRepository[VehicleEntity, VehicleModel]):
            model_class = VehicleModel
            mapper = VehicleMapper
    """

    model_class: Type[M]
    mapper: Any

    # FKs carregadas na mesma query
    select_related_fields: List[str] = []

    # Campo padrão de ordenação
    default_order_field: str = "-id"

    def _get_base_queryset(self) -> QuerySet:
        qs = self.model_class.objects.all()
        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)
        return qs

    def _to_entities(self, qs) -> List[T]:
        return [self.mapper.to_entity(m) for m in qs]

    def save(self, entity: T) -> None:
        """
        Persiste entidade (create ou update).

        Raises:
            ValidationError: Se violar unicidade ou o tamanho/faixa de uma coluna
        """
        logger.debug(f"Saving {self.model_class.__name__}: {entity.id}")
        try:
            with transaction.atomic():
                self.model_class.objects.update_or_create(
                    id=entity.id,
                    defaults=self.mapper.to_model_fields(entity),
                )
        except IntegrityError as e:
            logger.warning(f"{self.model_class.__name__} {entity.id} violou constraint: {e}")
            raise ValidationError(
                f"{self.model_class._meta.verbose_name} viola restrição de unicidade"
            )
        except DataError as e:
            logger.warning(f"{self.model_class.__name__} {entity.id} rejeitado pelo banco: {e}")
            raise ValidationError(
                f"{self.model_class._meta.verbose_name} tem valor fora do tamanho ou faixa da coluna"
            )
        logger.info(f"{self.model_class.__name__} saved: {entity.id}")

    def get_by_id(self, entity_id: str) -> Optional[T]:
        try:
            return self.mapper.to_entity(self._get_base_queryset().get(id=entity_id))
        except self.model_class.DoesNotExist:
            logger.debug(f"{self.model_class.__name__} not found: {entity_id}")
            return None

    def delete(self, entity_id: str) -> None:
        deleted_count, _ = self.model_class.objects.filter(id=entity_id).delete()
        if deleted_count:
            logger.info(f"{self.model_class.__name__} deleted: {entity_id}")

    def exists(self, entity_id: str) -> bool:
        return self.model_class.objects.filter(id=entity_id).exists()

    def count(self) -> int:
        return self.model_class.objects.count()

    def list_all(self) -> List[T]:
        return self._to_entities(
            self._get_base_queryset().order_by(self.default_order_field)
        )

    def _paginate(self, qs: QuerySet, pagination: PaginationParams) -> Tuple[List[T], int]:
        """Retorna (entidades da página, total)."""
        total = qs.count()
        page = qs[pagination.offset:pagination.offset + pagination.per_page]
        return self._to_entities(page), total
