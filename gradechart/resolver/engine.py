"""
Scheme resolver - the core of scheme inference.

Matches raw labels against the catalog, scores coverage, resolves
ambiguity and force overrides, and normalizes labels to the chosen
scheme's canonical levels.
"""

import logging
from collections import Counter
from typing import Any, NamedTuple, Sequence

from gradechart.catalog import (
    OUT_OF_SCHEME_COLOUR,
    UNKNOWN_COLOUR,
    SchemeCatalog,
    get_catalog,
)
from gradechart.config import Settings, get_settings
from gradechart.models import ResolutionResult, SchemeId
from gradechart.resolver.scorer import CoverageScorer
from gradechart.resolver.validator import InputValidator, coerce_label, parse_force_scheme

logger = logging.getLogger(__name__)

# Schemes that share the single value "C" and can't be told apart from it
COMPETENCE_SCHEMES: tuple[SchemeId, ...] = (SchemeId.CIDK, SchemeId.CNINC)

AMBIGUOUS_SCHEME_WARNING = (
    "Could not determine scheme. Using levels as they appear in data. "
    "If the values belong to overlapping schemes, choose one with the force scheme "
    "option (force_scheme in Python, --force-scheme on the command line)."
)

UNRESOLVED_COMPETENCE_WARNING = (
    "Could not determine whether the scheme was CIDK or CNINC. Please add "
    'force_scheme="CIDK" or force_scheme="CNINC" to the call as appropriate.'
)


class SchemeDecision(NamedTuple):
    """Scheme chosen after overrides, with the warnings raised choosing it."""

    scheme: SchemeId
    warnings: tuple[str, ...]


class Normalization(NamedTuple):
    """Labels mapped into a scheme, with the axis they are plotted on."""

    labels: tuple[str, ...]
    levels: tuple[str, ...]
    colours: tuple[str, ...]
    out_of_scheme: tuple[str, ...]


def _missing_level_warning(found: SchemeId, level: str, suggested: SchemeId) -> str:
    """Build the warning for a scheme whose data lacks one of its levels."""
    return (
        f"The scheme was determined to be {found.value} but there were no {level} "
        f"grades in the data. If this is incorrect and the scheme is {suggested.value}, "
        f'add force_scheme="{suggested.value}" to the call.'
    )


class SchemeResolver:
    """
    Infers the scheme of a sequence of raw labels.

    Resolution steps:
    1. Validate the input and coerce every value to text
    2. Stop at an Unknown scheme if any value matches no catalog entry
    3. Score coverage and pick the best-matching scheme
    4. Apply force-scheme overrides to break ties
    5. Normalize labels and attach level order and colours
    6. Add plausibility warnings for suspicious results

    Each call is independent; the resolver holds no per-call state.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        catalog: SchemeCatalog | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            settings: Configuration settings. Uses global settings if not provided.
            catalog: Scheme catalog. Uses the shared catalog if not provided.
        """
        self._settings = settings or get_settings()
        self._catalog = catalog or get_catalog()
        self._validator = InputValidator()
        self._scorer = CoverageScorer(self._catalog, self._settings.coverage_threshold)

    def resolve(self, raw_values: Any, force_scheme: Any = None) -> ResolutionResult:
        """
        Resolve raw labels to a scheme and normalize them.

        Args:
            raw_values: Flat sequence of scalar values (text or numbers).
            force_scheme: Optional USE, UBS, PF, CIDK or CNINC to break ties.
                Any other value is ignored.

        Returns:
            ResolutionResult with the scheme, normalized labels and warnings.

        Raises:
            MissingInputError: If raw_values was not supplied.
            WrongFormatError: If raw_values is tabular or empty.
        """
        values = self._validator.validate_data(raw_values)
        labels = tuple(coerce_label(v) for v in values)
        return self._resolve_labels(labels, parse_force_scheme(force_scheme))

    def _resolve_labels(
        self, labels: tuple[str, ...], force_scheme: SchemeId | None
    ) -> ResolutionResult:
        """Run inference on already-coerced labels."""
        tally = self._scorer.tally(labels)

        unknown = self._scorer.find_unknown(tally)
        if unknown:
            return self._unknown_result(labels, unknown)

        scores = self._scorer.score(tally)
        candidates = self._scorer.candidates(scores)
        logger.debug(
            "Coverage: %s; candidates: %s",
            ", ".join(f"{s.scheme.value}={s.coverage_percent:.1f}%" for s in scores),
            [c.value for c in candidates],
        )

        decision = self._decide_scheme(tally, candidates, force_scheme)
        normalization = self._normalize(labels, decision.scheme)

        warnings = list(decision.warnings)
        if normalization.out_of_scheme:
            warnings.append(
                f"Values not part of the {decision.scheme.value} scheme were plotted as they "
                f"appear: {', '.join(normalization.out_of_scheme)}"
            )
        warnings.extend(
            self._plausibility_warnings(decision.scheme, normalization.labels, candidates)
        )

        for message in warnings:
            logger.warning(message)
        logger.debug("Scheme determined: %s", decision.scheme.value)

        return ResolutionResult(
            scheme=decision.scheme,
            normalized=normalization.labels,
            levels=normalization.levels,
            colours=normalization.colours,
            warnings=tuple(warnings),
            scores=scores,
            candidates=candidates,
        )

    def _unknown_result(
        self, labels: tuple[str, ...], unknown: Sequence[str]
    ) -> ResolutionResult:
        """Build the identity result used when some values are unknown."""
        noun = "value" if len(unknown) == 1 else "values"
        message = (
            f"Could not determine scheme - Unknown {noun} in data: {', '.join(unknown)}. "
            "Using levels as they appear in data."
        )
        logger.warning(message)

        normalization = self._normalize(labels, SchemeId.UNKNOWN)
        return ResolutionResult(
            scheme=SchemeId.UNKNOWN,
            normalized=normalization.labels,
            levels=normalization.levels,
            colours=normalization.colours,
            warnings=(message,),
            unknown_values=tuple(unknown),
        )

    def _decide_scheme(
        self,
        tally: Counter[str],
        candidates: tuple[SchemeId, ...],
        force_scheme: SchemeId | None,
    ) -> SchemeDecision:
        """
        Choose the final scheme from the candidates and the force argument.

        Precedence:
        1. USE/UBS/PF narrow their parent scheme when it is a candidate and
           the level they drop was never observed; otherwise the plain
           estimate stands.
        2. USE/UBS/PF with a CIDK/CNINC estimate take that estimate, with a
           best-guess warning if the estimate was ambiguous.
        3. CIDK/CNINC apply whenever nothing else determined the scheme.
           Values outside the forced scheme are kept as they appear.
        4. Anything still undetermined becomes Unknown with a warning.
        """
        warnings: list[str] = []
        scheme = candidates[0] if len(candidates) == 1 else None

        reduction = self._catalog.reduction_of(force_scheme) if force_scheme else None

        if force_scheme is not None and reduction is not None:
            parent, dropped = reduction
            if parent in candidates:
                if self._count_canonical(tally, parent, dropped) == 0:
                    logger.debug("Scheme overridden. Using: %s", force_scheme.value)
                    scheme = force_scheme
                else:
                    logger.debug(
                        "Ignoring force scheme %s: %s grades present",
                        force_scheme.value,
                        dropped,
                    )
            elif candidates and candidates[0] in COMPETENCE_SCHEMES:
                scheme = candidates[0]
                if len(candidates) != 1:
                    warnings.append(
                        f"Could not tell whether the scheme was CIDK or CNINC, so "
                        f"{scheme.value} was used as a best guess. If this is not what "
                        'you wanted, add force_scheme="CIDK" or force_scheme="CNINC" '
                        "to the call."
                    )

        elif force_scheme in COMPETENCE_SCHEMES and scheme is None:
            logger.debug("Scheme overridden. Using: %s", force_scheme.value)
            scheme = force_scheme

        if scheme is None:
            warnings.insert(0, AMBIGUOUS_SCHEME_WARNING)
            scheme = SchemeId.UNKNOWN

        return SchemeDecision(scheme, tuple(warnings))

    def _count_canonical(self, tally: Counter[str], scheme: SchemeId, level: str) -> int:
        """Count observations that map to a given level within a scheme."""
        return sum(
            count
            for label, count in tally.items()
            if self._catalog.canonical_label(label, scheme) == level
        )

    def _normalize(self, labels: tuple[str, ...], scheme: SchemeId) -> Normalization:
        """
        Map labels into a scheme.

        Unknown schemes keep labels as they are, with levels in order of
        first appearance. Labels without an entry in a known scheme are
        kept as they are and appended after the scheme's levels.
        """
        distinct = tuple(dict.fromkeys(labels))

        if scheme == SchemeId.UNKNOWN:
            return Normalization(
                labels=labels,
                levels=distinct,
                colours=(UNKNOWN_COLOUR,) * len(distinct),
                out_of_scheme=(),
            )

        mapping = {label: self._catalog.canonical_label(label, scheme) for label in distinct}
        levels = self._catalog.levels_of(scheme)
        out_of_scheme = tuple(
            label for label, canonical in mapping.items()
            if canonical is None and label not in levels
        )

        return Normalization(
            labels=tuple(mapping[label] or label for label in labels),
            levels=levels + out_of_scheme,
            colours=self._catalog.colours_of(scheme) + (OUT_OF_SCHEME_COLOUR,) * len(out_of_scheme),
            out_of_scheme=out_of_scheme,
        )

    def _plausibility_warnings(
        self,
        scheme: SchemeId,
        normalized: tuple[str, ...],
        candidates: tuple[SchemeId, ...],
    ) -> list[str]:
        """Flag results that the data only partly supports."""
        warnings: list[str] = []
        observed = set(normalized)

        if scheme == SchemeId.UBSE:
            if "Borderline" not in observed:
                warnings.append(_missing_level_warning(SchemeId.UBSE, "Borderline", SchemeId.USE))
            if "Excellent" not in observed:
                warnings.append(_missing_level_warning(SchemeId.UBSE, "Excellent", SchemeId.UBS))

        if scheme == SchemeId.PFE and "Excellent" not in observed:
            warnings.append(_missing_level_warning(SchemeId.PFE, "Excellent", SchemeId.PF))

        if set(candidates) == set(COMPETENCE_SCHEMES) and scheme not in COMPETENCE_SCHEMES:
            warnings.append(UNRESOLVED_COMPETENCE_WARNING)

        return warnings
