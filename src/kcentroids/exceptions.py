"""Warning categories raised by the clustering engines."""


class ConvergenceWarning(UserWarning):
    """The Lloyd loop was stopped by its iteration ceiling before the
    centroids stabilized."""


class DegenerateClusteringWarning(UserWarning):
    """A partition had no pair of points in different clusters, so the
    Dunn Index separation term is undefined and the score is reported as 0."""
