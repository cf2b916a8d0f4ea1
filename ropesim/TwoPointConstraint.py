class TwoPointConstraint:
    """Base class for links between two points, referenced by handle."""

    def __init__(self, handle, a, b):
        self.handle = handle
        self.a = a
        self.b = b

    def involves(self, point_handle):
        return self.a == point_handle or self.b == point_handle

    def connects(self, a, b):
        # unordered pair
        return (self.a == a and self.b == b) or (self.a == b and self.b == a)

    def project(self, pa, pb):
        """Move the resolved endpoints toward satisfying the constraint. To be implemented by subclasses."""
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} handle={self.handle} a={self.a} b={self.b}>"

    def __str__(self):
        return self.__repr__()
