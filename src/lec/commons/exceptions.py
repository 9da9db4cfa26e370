class LECError(Exception):
    """Base class for largest empty circle errors."""


class DegenerateInput(LECError, ValueError):
    """
    The site set has no 2-D hull / Voronoi structure: fewer than 3 sites,
    duplicates, all sites collinear, or no candidate circle was found.
    """


class NoIntersection(LECError):
    """Two segments (or a segment and a ray/line) do not meet."""


class DegenerateLine(LECError, ValueError):
    """An implicit line u*x + v*y + w = 0 with u == v == 0."""
