"""Statistics over recorded meals."""

from typing import List, Tuple

from core.exceptions import InvalidInputError
from domain.models import Recipe

DEFAULT_POPULAR_LIMIT = 5


class StatisticService:

    def __init__(self, repository):
        self.repository = repository

    def get_most_popular_recipes(self, limit: int = DEFAULT_POPULAR_LIMIT) -> List[Tuple[Recipe, int]]:
        """Most often chosen recipes with their counts, most popular first."""
        if limit is None or limit < 1:
            raise InvalidInputError("Limit must be a positive number", argument="limit")
        return self.repository.most_popular(limit)
