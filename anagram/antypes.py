from collections import Counter
from typing import Callable, Protocol, TypeVar, TypeAlias

T = TypeVar('T')


class SupportsOrder(Protocol):
    def __lt__(self: T, other: T) -> bool:
        pass

    def __eq__(self: T, other: T) -> bool:
        pass


OrderedT = TypeVar('OrderedT', bound=SupportsOrder)

FreqTable: TypeAlias = Counter[str]
WordFunc: TypeAlias = Callable[..., T]
