from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EvolutionTrigger(str, Enum):
    LEVEL_UP = "level-up"
    FRIENDSHIP = "friendship"
    ITEM = "item"
    NONE = ""

    @classmethod
    def parse(cls, raw: str | None) -> EvolutionTrigger:
        """Map source trigger names (including aliases like "stone") to a trigger."""
        s = str(raw or "").strip().lower()
        if s in {"stone", "use-item", "use_item"}:
            return cls.ITEM
        for trigger in cls:
            if trigger.value == s:
                return trigger
        return cls.NONE


@dataclass(frozen=True)
class EvolutionStage:
    pokemon_id: int
    name: str
    trigger: EvolutionTrigger = EvolutionTrigger.NONE
    min_level: int = 0
    item: str | None = None

    def requirement(self) -> str:
        """Short label for what triggers this stage, e.g. "Lv16" or "Thunder Stone"."""
        if self.min_level > 0:
            return f"Lv{self.min_level}"
        if self.item:
            return self.item
        if self.trigger is EvolutionTrigger.FRIENDSHIP:
            return "Friendship"
        return ""


@dataclass(frozen=True)
class EvolutionChain:
    """A base stage followed by the evolutions in order."""

    base: EvolutionStage
    evolutions: tuple[EvolutionStage, ...] = field(default_factory=tuple)

    def stages(self) -> list[EvolutionStage]:
        return [self.base, *self.evolutions]

    def stage_names(self) -> list[str]:
        return [stage.name for stage in self.stages()]

    def pokemon_ids(self) -> list[int]:
        return [stage.pokemon_id for stage in self.stages()]

    def find_stage(self, pokemon_id: int) -> int | None:
        """Return the 0-based stage index of `pokemon_id`, or None if absent."""
        for index, stage_id in enumerate(self.pokemon_ids()):
            if stage_id == pokemon_id:
                return index
        return None

    def next_stage(self, pokemon_id: int) -> EvolutionStage | None:
        index = self.find_stage(pokemon_id)
        if index is None or index >= len(self.evolutions):
            return None
        return self.evolutions[index]

    def prev_stage(self, pokemon_id: int) -> EvolutionStage | None:
        index = self.find_stage(pokemon_id)
        if not index:
            return None
        return self.stages()[index - 1]
