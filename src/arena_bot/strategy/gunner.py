"""Reference targeting module: aims at the nearest visible player."""

from arena_bot.models import Position, RadarScanData, Rotation, bearing


class Gunner:
    """Targets the closest player in the radar snapshot."""

    def aim(self, origin: Position, scan: RadarScanData) -> Rotation | None:
        """Heading from origin to the nearest scanned player.

        Args:
            origin: Position to shoot from.
            scan: Latest radar snapshot.

        Returns:
            Heading in [0, 360), or None when no player is visible.
        """
        if not scan.players:
            return None

        target = min(scan.players, key=lambda p: origin.distance_to(p.position))
        return bearing(origin, target.position)
