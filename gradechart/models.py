"""
Pydantic models for the gradechart system.

These models define the strict schemas for:
- Catalog entries mapping raw labels to schemes and canonical labels
- Per-scheme coverage scores
- Resolution results with normalized labels and diagnostics
- Aggregated chart data handed to the renderer

All models are frozen so results cannot be mutated after construction.
"""

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    model_validator,
)


# ==============================================================================
# Enumerations
# ==============================================================================


class SchemeId(str, Enum):
    """Known grading and response schemes."""

    UBSE = "UBSE"  # Unsatisfactory / Borderline / Satisfactory / Excellent
    USE = "USE"  # UBSE without Borderline
    UBS = "UBS"  # UBSE without Excellent
    CIDK = "CIDK"  # Correct / Incorrect / Don't Know
    CNINC = "CNINC"  # Competent / Needs Improvement / Not Competent
    PFE = "PFE"  # Pass / Fail / Excellent
    PF = "PF"  # PFE without Excellent
    GENDER = "Gender"
    ETHNICITY = "Ethnicity"
    DISABILITY = "Disability"
    UNKNOWN = "Unknown"


class ChartType(str, Enum):
    """Y-axis scale of the bar chart."""

    FREQUENCY = "Frequency"
    PERCENTAGE = "Percentage"


def axis_label_for(scheme: SchemeId) -> str:
    """Return the category axis title used for a scheme."""
    if scheme in (SchemeId.GENDER, SchemeId.ETHNICITY, SchemeId.DISABILITY):
        return scheme.value
    if scheme == SchemeId.CIDK:
        return "Response"
    if scheme == SchemeId.UNKNOWN:
        return "Unknown Scheme"
    return "Grade"


# ==============================================================================
# Catalog Models
# ==============================================================================


class CatalogEntry(BaseModel):
    """
    A single raw value -> scheme -> canonical label mapping.

    The same raw value may appear in several entries when it is
    genuinely ambiguous across schemes (e.g. "C" or "E").
    """

    model_config = ConfigDict(frozen=True, strict=True)

    raw_value: str = Field(
        ...,
        min_length=1,
        description="Literal label as it may appear in the data (case-sensitive)",
    )

    scheme: SchemeId = Field(
        ...,
        description="Scheme this spelling belongs to",
    )

    canonical_label: str = Field(
        ...,
        min_length=1,
        description="Authoritative display label for the category",
    )


# ==============================================================================
# Resolution Models
# ==============================================================================


class SchemeScore(BaseModel):
    """How many observations a scheme's vocabulary explains."""

    model_config = ConfigDict(frozen=True, strict=True)

    scheme: SchemeId = Field(
        ...,
        description="Scheme being scored",
    )

    matched_count: int = Field(
        ...,
        ge=0,
        description="Observations whose value has an entry in this scheme",
    )

    total_count: int = Field(
        ...,
        gt=0,
        description="Total number of observations",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def coverage_percent(self) -> float:
        """Percentage of all observations explained by this scheme."""
        return 100 * self.matched_count / self.total_count

    @model_validator(mode="after")
    def validate_counts(self) -> "SchemeScore":
        """Ensure matched observations don't exceed the total."""
        if self.matched_count > self.total_count:
            raise ValueError(
                f"Matched count ({self.matched_count}) cannot exceed "
                f"total count ({self.total_count})"
            )
        return self


class ResolutionResult(BaseModel):
    """
    Outcome of resolving a sequence of raw labels to a scheme.

    Carries the normalized sequence, the ordered levels and colours the
    chart uses, and every diagnostic raised along the way.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    scheme: SchemeId = Field(
        ...,
        description="Finalized scheme",
    )

    normalized: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Canonical label for each observation, in input order",
    )

    levels: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Category axis order, including zero-count levels",
    )

    colours: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Display colour for each level, aligned with levels",
    )

    warnings: tuple[str, ...] = Field(
        default=(),
        description="Diagnostic messages, in the order they were raised",
    )

    scores: tuple[SchemeScore, ...] = Field(
        default=(),
        description="Coverage score per catalog scheme (empty if unknown values were found)",
    )

    candidates: tuple[SchemeId, ...] = Field(
        default=(),
        description="Schemes that met the best-match criteria before overrides",
    )

    unknown_values: tuple[str, ...] = Field(
        default=(),
        description="Distinct values that match no catalog entry",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def axis_label(self) -> str:
        """Category axis title for the finalized scheme."""
        return axis_label_for(self.scheme)

    @model_validator(mode="after")
    def validate_alignment(self) -> "ResolutionResult":
        """Ensure colours line up with levels and every label has a level."""
        if len(self.levels) != len(self.colours):
            raise ValueError(
                f"Got {len(self.colours)} colours for {len(self.levels)} levels"
            )
        missing = set(self.normalized) - set(self.levels)
        if missing:
            raise ValueError(f"Normalized labels missing from levels: {sorted(missing)}")
        return self


# ==============================================================================
# Chart Models
# ==============================================================================


class ChartData(BaseModel):
    """
    Aggregated values for one bar chart.

    Categories, values and colours are parallel sequences in axis order.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    chart_type: ChartType = Field(
        ...,
        description="Whether values are counts or percentages",
    )

    categories: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Category labels in axis order",
    )

    values: tuple[float, ...] = Field(
        ...,
        description="Bar height per category",
    )

    colours: tuple[str, ...] = Field(
        ...,
        description="Bar colour per category",
    )

    x_label: str = Field(
        ...,
        description="Category axis title",
    )

    y_label: str = Field(
        ...,
        description="Value axis title",
    )

    total_observations: int = Field(
        ...,
        gt=0,
        description="Number of observations aggregated",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_value(self) -> float:
        """Sum of all bar heights."""
        return float(sum(self.values))

    @model_validator(mode="after")
    def validate_parallel(self) -> "ChartData":
        """Ensure categories, values and colours have the same length."""
        if not len(self.categories) == len(self.values) == len(self.colours):
            raise ValueError(
                "categories, values and colours must have the same length "
                f"(got {len(self.categories)}, {len(self.values)}, {len(self.colours)})"
            )
        return self
