from .TwoPointConstraint import TwoPointConstraint


class DistanceConstraint(TwoPointConstraint):
    def __init__(self, handle, a, b, rest_length):
        super().__init__(handle, a, b)
        # fixed at creation; this is what makes the link inextensible
        self.rest_length = float(rest_length)

    def project(self, pa, pb):
        """Snap both endpoints to rest length around their midpoint.

        Locked endpoints stay put. When only one endpoint is free it is the
        only one that moves, so the locked one acts as an anchor.
        """
        if pa.locked and pb.locked:
            return
        center = pa.pos.midpoint(pb.pos)
        # coincident endpoints fall back to (1, 0) inside normalize()
        half = (pa.pos - pb.pos).normalize().scale(self.rest_length * 0.5)
        if not pa.locked:
            pa.pos = center + half
        if not pb.locked:
            pb.pos = center - half
