"""Entity models for NLU."""

from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field


class Category(Enum):
    """
    Категории упоминаний сущностей в высказывании.

    Значение совпадает с именем колонки в таблице истории.
    """
    OBJECTS = "objects"    # Предметы ("the red shirt")
    ACTORS = "actors"      # Люди и участники ("my mom")
    TIMES = "times"        # Время ("tomorrow at 5")
    PLACES = "places"      # Места ("New York")


@dataclass
class StructuredInput:
    """
    Категоризированное представление одного высказывания.

    Создаётся внешним классификатором. Резолвер местоимений переписывает
    списки категорий на месте; список местоимений не изменяется.

    Attributes:
        objects: Упоминания предметов в порядке чтения
        actors: Упоминания участников
        times: Упоминания времени
        places: Упоминания мест
        pronouns: Местоимения в порядке, выданном классификатором
    """
    objects: List[str] = field(default_factory=list)
    actors: List[str] = field(default_factory=list)
    times: List[str] = field(default_factory=list)
    places: List[str] = field(default_factory=list)
    pronouns: Optional[List[str]] = field(default_factory=list)

    def mentions(self, category: Category) -> List[str]:
        """Получить список упоминаний категории (тот же объект, не копию)."""
        return getattr(self, Category(category).value)

    def replace_mention(self, category: Category, old: str, new: str) -> int:
        """
        Заменить все точные вхождения old на new в списке категории.

        Returns:
            Количество замен
        """
        values = self.mentions(category)
        replaced = 0
        for i, value in enumerate(values):
            if value != old:
                continue
            values[i] = new
            replaced += 1
        return replaced

    def has_pronouns(self) -> bool:
        return bool(self.pronouns)
