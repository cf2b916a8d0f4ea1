class solver:
    def __init__(self, enabled=True):
        self.enabled = bool(enabled)

    def solve(self, world, dt):
        """
        Advance the solver's share of one simulation step. dt is in milliseconds.
        """
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} enabled={self.enabled}>"

    def __str__(self):
        return self.__repr__()
