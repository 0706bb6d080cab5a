# core/vector.py
import math

class Vector3:
    """
    A 3D vector used both as a point and as an RGB color.

    Vectors are treated as values: every operation returns a new Vector3
    and nothing mutates x, y or z after construction.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def splat(value: float) -> "Vector3":
        return Vector3(value, value, value)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __getitem__(self, axis: int) -> float:
        # Axis 0, 1, 2 -> x, y, z; used by the slab test and the BVH sort.
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        if axis == 2:
            return self.z
        raise IndexError(f"Vector3 axis out of range: {axis}")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def near_zero(self) -> bool:
        """
        True when every component is smaller than 1e-8 in magnitude.
        """
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def isclose(self, other: "Vector3", tol: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=tol) and
                math.isclose(self.y, other.y, abs_tol=tol) and
                math.isclose(self.z, other.z, abs_tol=tol))

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
