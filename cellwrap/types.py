from typing import Callable, TypeAlias, TypeVar
import numpy as np

T = TypeVar("T", bound=np.generic)

Vector: TypeAlias = np.ndarray[tuple[int, ...], np.dtype[T]]  # type: ignore[type-var]
IntVector: TypeAlias = Vector[np.int64]
IntMatrix: TypeAlias = np.ndarray[tuple[int, int], np.dtype[np.int64]]

Span: TypeAlias = tuple[int, int]

Measure: TypeAlias = Callable[[str], int]  # display width of a text fragment
