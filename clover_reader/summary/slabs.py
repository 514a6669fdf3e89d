from dataclasses import dataclass
from typing import Iterable


class InvalidSlabError(ValueError):
    pass


@dataclass(frozen=True)
class SlabSet:
    """Immutable ascending set of supported window sizes (months)."""

    sizes: tuple[int, ...]

    def __post_init__(self):
        sizes = tuple(int(s) for s in self.sizes)
        if not sizes:
            raise ValueError("slab set must not be empty")
        if any(s <= 0 for s in sizes):
            raise ValueError("slab sizes must be > 0")
        if len(set(sizes)) != len(sizes):
            raise ValueError("slab sizes must be unique")
        object.__setattr__(self, "sizes", tuple(sorted(sizes)))

    @classmethod
    def of(cls, sizes: Iterable[int]) -> "SlabSet":
        return cls(tuple(sizes))

    def __contains__(self, months: object) -> bool:
        if isinstance(months, bool) or not isinstance(months, int):
            return False
        return months in self.sizes

    def __iter__(self):
        return iter(self.sizes)

    def larger_than(self, months: int) -> tuple[int, ...]:
        return tuple(s for s in self.sizes if s > months)

    def smaller_than(self, months: int) -> tuple[int, ...]:
        return tuple(s for s in self.sizes if s < months)

    def validate(self, months: int) -> int:
        if months not in self:
            supported = ", ".join(str(s) for s in self.sizes)
            raise InvalidSlabError(f"Invalid slab '{months}'. Supported values: {supported}.")
        return months


DEFAULT_SLABS = SlabSet((1, 3, 6, 12))
