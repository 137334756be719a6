"""
Página de resultados devolvida pelas listagens paginadas (atividades).
"""

from dataclasses import dataclass
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass
class PaginatedResultDTO(Generic[T]):
    """
    `page` começa em 1. `total` conta todos os itens que atendem ao filtro,
    não só os da página.
    """

    items: List[T]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        if self.per_page <= 0:
            return 0
        return -(-self.total // self.per_page)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def to_dict(self) -> dict:
        data = {"items": [item.to_dict() for item in self.items]}
        data.update(
            total=self.total,
            page=self.page,
            per_page=self.per_page,
            total_pages=self.total_pages,
            has_next=self.has_next,
            has_prev=self.has_prev,
        )
        return data
