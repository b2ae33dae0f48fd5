"""
Coverage scoring for scheme inference.

Counts how many observations each catalog scheme explains and picks
the schemes that best account for the data.
"""

from collections import Counter
from typing import Sequence

from gradechart.catalog import SchemeCatalog
from gradechart.models import SchemeId, SchemeScore


class CoverageScorer:
    """
    Scores catalog schemes against a set of observations.

    A scheme is a candidate when it explains the highest number of
    observations and at least `coverage_threshold` percent of them.
    """

    def __init__(self, catalog: SchemeCatalog, coverage_threshold: float = 95.0):
        self._catalog = catalog
        self._coverage_threshold = coverage_threshold

    @staticmethod
    def tally(labels: Sequence[str]) -> Counter[str]:
        """Count occurrences of each distinct label."""
        return Counter(labels)

    def find_unknown(self, tally: Counter[str]) -> list[str]:
        """
        List distinct labels with no catalog entry.

        Returns:
            Unknown labels in order of first appearance.
        """
        return [label for label in tally if not self._catalog.is_known(label)]

    def score(self, tally: Counter[str]) -> tuple[SchemeScore, ...]:
        """
        Compute the coverage of every catalog scheme.

        Each observation counts once toward every scheme its value
        belongs to, so ambiguous values raise several scores.

        Args:
            tally: Label counts for the current data.

        Returns:
            One score per catalog scheme, in catalog order.
        """
        total = sum(tally.values())
        matched: Counter[SchemeId] = Counter()

        for label, count in tally.items():
            for scheme in {entry.scheme for entry in self._catalog.lookup(label)}:
                matched[scheme] += count

        return tuple(
            SchemeScore(scheme=scheme, matched_count=matched[scheme], total_count=total)
            for scheme in self._catalog.schemes()
        )

    def candidates(self, scores: Sequence[SchemeScore]) -> tuple[SchemeId, ...]:
        """
        Select the best-matching schemes.

        Returns:
            Schemes with the maximum matched count that also reach the
            coverage threshold, in catalog order. Exactly one means the
            scheme is determined; zero or several means ambiguity.
        """
        if not scores:
            return ()

        best = max(s.matched_count for s in scores)
        return tuple(
            s.scheme
            for s in scores
            if s.matched_count == best and s.coverage_percent >= self._coverage_threshold
        )
