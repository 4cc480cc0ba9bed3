"""Dense n-dimensional tensors stored in row-major order."""

from __future__ import annotations

import itertools
import math
import numbers
import operator
from typing import Any, Callable, Iterable, Iterator, Sequence


def _strides(shape: Sequence[int]) -> tuple[int, ...]:
    strides = []
    stride = 1
    for dim in reversed(shape):
        strides.append(stride)
        stride *= dim
    return tuple(reversed(strides))


def _format_scalar(value: Any) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _dimension_error(rank: int) -> ValueError:
    return ValueError(f"Number of dimensions do not match with {rank}")


class Tensor:
    """A tensor of fixed rank whose values live in one flat row-major list."""

    __slots__ = ("_shape", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *shape: int, data: Iterable[Any] | None = None) -> None:
        dims = tuple(int(d) for d in shape)
        if any(d < 0 for d in dims):
            raise ValueError("Tensor dimensions must not be negative")
        self._shape = dims
        total = math.prod(dims)
        if data is None:
            self._data = [0.0] * total
        else:
            values = list(data)
            if len(values) != total:
                raise ValueError("Data size does not match tensor size")
            self._data = values

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def rank(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def data(self) -> list[Any]:
        """A copy of the values in row-major order."""
        return list(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def _offset(self, index: Any) -> int:
        if not isinstance(index, tuple):
            index = (index,)
        if len(index) != self.rank:
            raise _dimension_error(self.rank)
        offset = 0
        for position, dim, stride in zip(index, self._shape, _strides(self._shape)):
            position = int(position)
            if not 0 <= position < dim:
                raise IndexError(f"index {position} out of range for dimension of size {dim}")
            offset += position * stride
        return offset

    def __getitem__(self, index: Any) -> Any:
        return self._data[self._offset(index)]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[self._offset(index)] = value

    def fill(self, value: Any) -> None:
        """Set every element to ``value``."""
        self._data = [value] * len(self._data)

    def assign(self, values: Iterable[Any]) -> None:
        """Replace all elements with ``values``, which must match the size."""
        new_values = list(values)
        if len(new_values) != len(self._data):
            raise ValueError("Data size does not match tensor size")
        self._data = new_values

    def reshape(self, *args: int) -> None:
        """Change the shape in place, truncating or zero-padding the data."""
        if len(args) != self.rank:
            raise _dimension_error(self.rank)
        dims = tuple(int(d) for d in args)
        if any(d < 0 for d in dims):
            raise ValueError("Tensor dimensions must not be negative")
        total = math.prod(dims)
        self._shape = dims
        if total <= len(self._data):
            del self._data[total:]
        else:
            self._data.extend([0.0] * (total - len(self._data)))

    @staticmethod
    def broadcast_shape(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
        """Return the shape two tensors broadcast to."""
        if len(a) != len(b):
            raise _dimension_error(len(a))
        result = []
        for dim_a, dim_b in zip(a, b):
            if dim_a == dim_b or dim_b == 1:
                result.append(dim_a)
            elif dim_a == 1:
                result.append(dim_b)
            else:
                raise ValueError(
                    "Shapes do not match and they are not compatible for broadcasting"
                )
        return tuple(result)

    def broadcast(self, other: Tensor, op: Callable[[Any, Any], Any]) -> Tensor:
        """Combine two tensors element by element with broadcasting."""
        shape = Tensor.broadcast_shape(self._shape, other._shape)
        strides_a = [
            0 if dim == 1 else stride
            for dim, stride in zip(self._shape, _strides(self._shape))
        ]
        strides_b = [
            0 if dim == 1 else stride
            for dim, stride in zip(other._shape, _strides(other._shape))
        ]
        values = []
        for index in itertools.product(*(range(d) for d in shape)):
            offset_a = sum(i * s for i, s in zip(index, strides_a))
            offset_b = sum(i * s for i, s in zip(index, strides_b))
            values.append(op(self._data[offset_a], other._data[offset_b]))
        return Tensor(*shape, data=values)

    def map(self, func: Callable[[Any], Any]) -> Tensor:
        """Return a new tensor with ``func`` applied to every element."""
        return Tensor(*self._shape, data=[func(v) for v in self._data])

    def _combine(self, other: Any, op: Callable[[Any, Any], Any], reflected: bool = False) -> Any:
        if isinstance(other, Tensor):
            return other.broadcast(self, op) if reflected else self.broadcast(other, op)
        if isinstance(other, numbers.Number):
            if reflected:
                return self.map(lambda v: op(other, v))
            return self.map(lambda v: op(v, other))
        return NotImplemented

    def __add__(self, other: Any) -> Any:
        return self._combine(other, operator.add)

    def __radd__(self, other: Any) -> Any:
        return self._combine(other, operator.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._combine(other, operator.sub)

    def __rsub__(self, other: Any) -> Any:
        return self._combine(other, operator.sub, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._combine(other, operator.mul)

    def __rmul__(self, other: Any) -> Any:
        return self._combine(other, operator.mul, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, Tensor):
            return NotImplemented
        return self._combine(other, operator.truediv)

    def __neg__(self) -> Tensor:
        return self.map(operator.neg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self._shape == other._shape and self._data == other._data

    def _render(self, level: int, offset: int) -> str:
        indent = " " * (level * 4)
        dim = self._shape[level]
        if level == self.rank - 1:
            row = self._data[offset:offset + dim]
            return indent + " ".join(_format_scalar(v) for v in row)
        block = math.prod(self._shape[level + 1:])
        inner = "\n".join(self._render(level + 1, offset + i * block) for i in range(dim))
        return f"{indent}{{\n{inner}\n{indent}}}"

    def __str__(self) -> str:
        if self.rank == 0:
            return _format_scalar(self._data[0])
        return self._render(0, 0)

    def __repr__(self) -> str:
        return f"Tensor(shape={self._shape}, data={self._data})"


def transpose_2d(tensor: Tensor) -> Tensor:
    """Swap the last two dimensions, keeping any leading batch dimensions."""
    if tensor.rank < 2:
        raise ValueError("Cannot transpose 1D tensor: need at least 2 dimensions")
    *batch, rows, cols = tensor.shape
    block_size = rows * cols
    data = tensor.data
    values: list[Any] = []
    if block_size:
        for start in range(0, len(data), block_size):
            block = data[start:start + block_size]
            matrix = [block[r * cols:(r + 1) * cols] for r in range(rows)]
            values.extend(x for column in zip(*matrix) for x in column)
    return Tensor(*batch, cols, rows, data=values)


def matrix_product(a: Tensor, b: Tensor) -> Tensor:
    """Multiply the last two dimensions; batch dimensions must match."""
    if a.rank != b.rank:
        raise _dimension_error(a.rank)
    if a.rank < 2:
        raise ValueError("Need at least 2D tensors for matrix multiplication")
    *batch_a, m, k = a.shape
    *batch_b, k2, n = b.shape
    if k != k2:
        raise ValueError("Matrix dimensions are incompatible for multiplication")
    if batch_a != batch_b:
        raise ValueError(
            "Matrix dimensions are compatible for multiplication BUT Batch dimensions do not match"
        )
    data_a, data_b = a.data, b.data
    values: list[Any] = []
    for batch in range(math.prod(batch_a)):
        block_a = data_a[batch * m * k:(batch + 1) * m * k]
        block_b = data_b[batch * k * n:(batch + 1) * k * n]
        rows = [block_a[i * k:(i + 1) * k] for i in range(m)]
        columns = [block_b[j::n] for j in range(n)]
        for row in rows:
            values.extend(sum(x * y for x, y in zip(row, column)) for column in columns)
    return Tensor(*batch_a, m, n, data=values)


def apply(tensor: Tensor, func: Callable[[Any], Any]) -> Tensor:
    """Return a copy of ``tensor`` with ``func`` applied to every element."""
    return tensor.map(func)