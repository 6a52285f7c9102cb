from __future__ import annotations

import math
from dataclasses import dataclass

from catalog_console.app.config import DEFAULT_PAGE_SIZE


@dataclass
class PaginationState:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total: int = 0

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.page_size)) if self.page_size else 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def row_number(self, index: int) -> int:
        return index + 1 + self.page_size * (self.page - 1)

