from typing import Callable, TypeAlias

from numpy.typing import NDArray

UnitTransform: TypeAlias = Callable[[NDArray], NDArray]
