from collections.abc import Callable, Sequence
from functools import partial
from operator import add, mul, sub, truediv
from typing import Annotated, Any, NamedTuple

import numpy as np
from numpy import array, bool_, floating, uint8
from numpy.typing import DTypeLike, NDArray
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
)


class Vector3[T](NamedTuple):
    """
    Three component vector.

    Components are either plain floats or numpy arrays of one common shape, in
    which case every operation works elementwise and a single `Vector3` stands
    for a whole vector field (one vector per pixel).
    """

    x: T
    y: T
    z: T

    # Keep numpy from broadcasting over the tuple in `ndarray * Vector3`.
    __array_ufunc__ = None

    def _apply(self, op: Callable, other: "Vector3[T] | T") -> "Vector3[T]":
        if isinstance(other, Vector3):
            return Vector3(*map(op, self, other))
        return Vector3(op(self.x, other), op(self.y, other), op(self.z, other))

    def _rapply(self, op: Callable, other: T) -> "Vector3[T]":
        return Vector3(op(other, self.x), op(other, self.y), op(other, self.z))

    def __neg__(self) -> "Vector3[T]":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3[T] | T") -> "Vector3[T]":  # type: ignore[override]
        return self._apply(add, other)

    def __sub__(self, other: "Vector3[T] | T") -> "Vector3[T]":
        return self._apply(sub, other)

    def __mul__(self, other: T) -> "Vector3[T]":  # type: ignore[override]
        return self._apply(mul, other)

    def __rmul__(self, other: T) -> "Vector3[T]":  # type: ignore[override]
        return self._rapply(mul, other)

    def __truediv__(self, other: T) -> "Vector3[T]":
        return self._apply(truediv, other)

    def dot(self, other: "Vector3[T]") -> T:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> T:
        """Euclidean length."""
        return np.sqrt(self.dot(self))

    def normal(self) -> "Vector3[T]":
        """
        Scale the vector to unit length.

        A zero-length vector gives non-finite components; callers are expected
        not to pass degenerate directions.
        """
        return self / self.norm()

    def rot_xy(self, rot: "Vector3[T]") -> "Vector3[T]":
        """
        Rotate the x/y components by the direction of `rot`, keeping z.

        The rotation takes +x onto the direction of `rot`. A zero-length `rot`
        has no direction and is treated as the identity rotation.
        """
        length = rot.norm()
        degenerate = length == 0
        safe_length = np.where(degenerate, 1.0, length)
        cos = np.where(degenerate, 1.0, rot.x / safe_length)
        sin = np.where(degenerate, 0.0, rot.y / safe_length)
        return Vector3(
            self.x * cos - self.y * sin,
            self.x * sin + self.y * cos,
            self.z,
        )


def point(x: float, y: float) -> Vector3[float]:
    """A point in the image plane (z = 0)."""
    return Vector3(float(x), float(y), 0.0)


class ConfigBaseModel(BaseModel):
    """Base class for the immutable configuration models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )


def serialize_ndarray(array_: NDArray[Any]) -> list:
    """Serialize numpy array to a Python list for JSON serialization."""
    return array_.tolist()


def coerce_to_array(
    dtype: DTypeLike, value: Sequence | NDArray | None
) -> NDArray | None:
    """
    Coerce input to dtype numpy array.

    Handles JSON deserialization where Python creates int64 integers by default.
    """
    if isinstance(value, Sequence):
        try:
            return array(value, dtype=dtype)
        except OverflowError as ofe:
            raise ValueError("Array's value(s) out of range") from ofe

    return value


def validate_shape(n_dims: int, value: NDArray) -> NDArray:
    if (array_dims := len(value.shape)) != n_dims:
        raise ValueError(
            f"Array shape mismatch, expected {n_dims} dimension(s), but got {array_dims}"
        )
    return value


def validate_channels(n_channels: int, value: NDArray) -> NDArray:
    if (channels := value.shape[-1]) != n_channels:
        raise ValueError(
            f"Channel mismatch, expected {n_channels} channel(s), but got {channels}"
        )
    return value


def validate_dtype(dtype: DTypeLike, value: NDArray) -> NDArray:
    if value.dtype != dtype:
        raise ValueError(f"Array dtype mismatch, expected {dtype}, got {value.dtype}")
    return value


type FloatArray = NDArray[floating]
type BinaryMask = NDArray[bool_]  # Shape: (H, W)

type ImageRGBA = Annotated[
    NDArray[uint8],
    BeforeValidator(partial(coerce_to_array, uint8)),
    AfterValidator(partial(validate_shape, 3)),
    AfterValidator(partial(validate_channels, 4)),
    AfterValidator(partial(validate_dtype, uint8)),
    PlainSerializer(serialize_ndarray),
]  # Shape: (H, W, 4)
