# core/uv.py
class UV:
    """
    Surface texture coordinate, both components in [0, 1] on a sphere.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __iter__(self):
        yield self.u
        yield self.v

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
