"""
Integer voxel position utilities.
"""

import math
from typing import Any, Iterator, Sequence
from typing_extensions import Self  # For compatibility with Python <= 3.10

import numpy as np


def _as_voxel_coordinate(value: Any) -> int:
    """
    Converts a coordinate to an integer, rejecting values that are not whole numbers.

    :param value: The coordinate value.
    :return: The coordinate as an integer.
    :raises ValueError: if the value is not integral.
    """
    try:
        as_int = int(value)
    except OverflowError as exc:
        raise ValueError(f"Voxel coordinates must be finite, got {value}.") from exc
    if as_int != value:
        raise ValueError(
            f"Voxel coordinates must be integers, got {value}. "
            "Use Position.from_world() for continuous coordinates."
        )
    return as_int


class Position:
    """Represents an immutable integer 3D voxel position."""

    __slots__ = ("_coords",)

    def __init__(self, x: int = 0, y: int = 0, z: int = 0) -> None:
        """
        Creates a new Position object.

        :param x: X coordinate
        :param y: Y coordinate
        :param z: Z coordinate
        """
        self._coords = (
            _as_voxel_coordinate(x),
            _as_voxel_coordinate(y),
            _as_voxel_coordinate(z),
        )

    @property
    def x(self) -> int:
        return self._coords[0]

    @property
    def y(self) -> int:
        return self._coords[1]

    @property
    def z(self) -> int:
        return self._coords[2]

    @classmethod
    def from_list(cls, plist: Sequence[int]) -> Self:
        """
        Creates a position from a 3-element list ``[x, y, z]``.

        :param plist: List containing the input position.
        :return: Position object
        :raises ValueError: if the list does not have exactly 3 elements.
        """
        if len(plist) != 3:
            raise ValueError("List must contain exactly 3 elements.")
        return cls(x=plist[0], y=plist[1], z=plist[2])

    @classmethod
    def from_dict(cls, pos_dict: dict[str, Any]) -> Self:
        """
        Creates a position from a dictionary with ``x``, ``y``, and ``z`` keys.
        Missing keys default to zero.

        :param pos_dict: A position dictionary.
        :return: Position object
        """
        return cls(
            x=pos_dict.get("x", 0),
            y=pos_dict.get("y", 0),
            z=pos_dict.get("z", 0),
        )

    @classmethod
    def from_world(cls, x: float, y: float, z: float) -> Self:
        """
        Creates the position of the voxel containing a continuous world location.

        :param x: X world coordinate
        :param y: Y world coordinate
        :param z: Z world coordinate
        :return: Position object
        """
        return cls(math.floor(x), math.floor(y), math.floor(z))

    @classmethod
    def construct(cls, data: Any) -> Self:
        """
        Constructs a position object from any of the allowable input types.

        :param data: The input data describing the position.
        :return: Position object
        :raises ValueError: if the input data type is unsupported.
        """
        if isinstance(data, Position):
            return data
        elif isinstance(data, (list, tuple)):
            return cls.from_list(data)
        elif isinstance(data, dict):
            return cls.from_dict(data)
        elif isinstance(data, np.ndarray):
            return cls.from_list(data.tolist())
        else:
            raise ValueError(
                f"Cannot construct position from object of type {type(data).__name__}."
            )

    def to_list(self) -> list[int]:
        return list(self._coords)

    def to_dict(self) -> dict[str, int]:
        """
        Converts the position instance to a dictionary compatible with YAML.

        :return: The output dictionary.
        """
        return {"x": self.x, "y": self.y, "z": self.z}

    def to_array(self) -> np.ndarray:
        return np.array(self._coords, dtype=int)

    def get_linear_distance(self, other: Self) -> float:
        """
        Gets the straight-line (Euclidean) distance between two positions.

        :param other: Position from which to get the linear distance.
        :return: Linear distance between this and the other position.
        """
        return float(np.linalg.norm(self.to_array() - other.to_array()))

    def get_manhattan_distance(self, other: Self) -> int:
        """
        Gets the sum of absolute coordinate differences between two positions.

        :param other: Position from which to get the distance.
        :return: Manhattan distance between this and the other position.
        """
        return sum(abs(a - b) for a, b in zip(self._coords, other._coords))

    def get_chebyshev_distance(self, other: Self) -> int:
        """
        Gets the largest absolute coordinate difference between two positions.

        :param other: Position from which to get the distance.
        :return: Chebyshev distance between this and the other position.
        """
        return max(abs(a - b) for a, b in zip(self._coords, other._coords))

    def __add__(self, other: Self) -> Self:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(*(a + b for a, b in zip(self._coords, other._coords)))

    def __sub__(self, other: Self) -> Self:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(*(a - b for a, b in zip(self._coords, other._coords)))

    def __iter__(self) -> Iterator[int]:
        return iter(self._coords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._coords == other._coords

    def __lt__(self, other: Self) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._coords < other._coords

    def __hash__(self) -> int:
        return hash(self._coords)

    def __repr__(self) -> str:
        """
        Representation for printing a Position object.

        :return: Printable string.
        """
        return f"Position: [x={self.x}, y={self.y}, z={self.z}]"
