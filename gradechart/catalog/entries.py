"""
Static scheme catalog data.

Every spelling the system recognises is listed literally. Matching is
exact and case-sensitive, so each casing or spacing variant that should
be accepted needs its own row.
"""

from types import MappingProxyType

from gradechart.models import SchemeId

# (raw value, scheme, canonical label), in catalog order
CATALOG_ROWS: tuple[tuple[str, SchemeId, str], ...] = (
    ("U", SchemeId.UBSE, "Unsatisfactory"),
    ("B", SchemeId.UBSE, "Borderline"),
    ("S", SchemeId.UBSE, "Satisfactory"),
    ("E", SchemeId.UBSE, "Excellent"),
    ("Unsatisfactory", SchemeId.UBSE, "Unsatisfactory"),
    ("Borderline", SchemeId.UBSE, "Borderline"),
    ("Satisfactory", SchemeId.UBSE, "Satisfactory"),
    ("Excellent", SchemeId.UBSE, "Excellent"),
    ("C", SchemeId.CIDK, "Correct"),
    ("C", SchemeId.CNINC, "Competent"),
    ("I", SchemeId.CIDK, "Incorrect"),
    ("DK", SchemeId.CIDK, "Don't Know"),
    ("Correct", SchemeId.CIDK, "Correct"),
    ("Incorrect", SchemeId.CIDK, "Incorrect"),
    ("DontKnow", SchemeId.CIDK, "Don't Know"),
    ("Dont Know", SchemeId.CIDK, "Don't Know"),
    ("Don't Know", SchemeId.CIDK, "Don't Know"),
    ("NI", SchemeId.CNINC, "Needs Improvement"),
    ("NC", SchemeId.CNINC, "Not Competent"),
    ("Competent", SchemeId.CNINC, "Competent"),
    ("Needs Improvement", SchemeId.CNINC, "Needs Improvement"),
    ("Not Competent", SchemeId.CNINC, "Not Competent"),
    ("NeedsImprovement", SchemeId.CNINC, "Needs Improvement"),
    ("NotCompetent", SchemeId.CNINC, "Not Competent"),
    ("u", SchemeId.UBSE, "Unsatisfactory"),
    ("b", SchemeId.UBSE, "Borderline"),
    ("s", SchemeId.UBSE, "Satisfactory"),
    ("e", SchemeId.UBSE, "Excellent"),
    ("unsatisfactory", SchemeId.UBSE, "Unsatisfactory"),
    ("borderline", SchemeId.UBSE, "Borderline"),
    ("satisfactory", SchemeId.UBSE, "Satisfactory"),
    ("excellent", SchemeId.UBSE, "Excellent"),
    ("dk", SchemeId.CIDK, "Don't Know"),
    ("correct", SchemeId.CIDK, "Correct"),
    ("incorrect", SchemeId.CIDK, "Incorrect"),
    ("dontknow", SchemeId.CIDK, "Don't Know"),
    ("dont know", SchemeId.CIDK, "Don't Know"),
    ("don't know", SchemeId.CIDK, "Don't Know"),
    ("ni", SchemeId.CNINC, "Needs Improvement"),
    ("nc", SchemeId.CNINC, "Not Competent"),
    ("competent", SchemeId.CNINC, "Competent"),
    ("needs improvement", SchemeId.CNINC, "Needs Improvement"),
    ("not competent", SchemeId.CNINC, "Not Competent"),
    ("needsimprovement", SchemeId.CNINC, "Needs Improvement"),
    ("notcompetent", SchemeId.CNINC, "Not Competent"),
    ("Pass", SchemeId.PFE, "Pass"),
    ("Fail", SchemeId.PFE, "Fail"),
    ("pass", SchemeId.PFE, "Pass"),
    ("fail", SchemeId.PFE, "Fail"),
    ("p", SchemeId.PFE, "Pass"),
    ("f", SchemeId.PFE, "Fail"),
    ("P", SchemeId.PFE, "Pass"),
    ("F", SchemeId.PFE, "Fail"),
    # Numerically coded responses
    ("1", SchemeId.CIDK, "Correct"),
    ("0", SchemeId.CIDK, "Don't Know"),
    ("-0.25", SchemeId.CIDK, "Incorrect"),
    ("Male", SchemeId.GENDER, "Male"),
    ("Female", SchemeId.GENDER, "Female"),
    ("male", SchemeId.GENDER, "Male"),
    ("female", SchemeId.GENDER, "Female"),
    ("M", SchemeId.GENDER, "Male"),
    ("F", SchemeId.GENDER, "Female"),
    ("m", SchemeId.GENDER, "Male"),
    ("f", SchemeId.GENDER, "Female"),
    ("c", SchemeId.CIDK, "Correct"),
    ("c", SchemeId.CNINC, "Competent"),
    ("White", SchemeId.ETHNICITY, "White"),
    ("white", SchemeId.ETHNICITY, "White"),
    ("Asian", SchemeId.ETHNICITY, "Asian"),
    ("asian", SchemeId.ETHNICITY, "Asian"),
    ("Other", SchemeId.ETHNICITY, "Other"),
    ("other", SchemeId.ETHNICITY, "Other"),
    ("Black", SchemeId.ETHNICITY, "Other"),
    ("black", SchemeId.ETHNICITY, "Other"),
    ("Arab", SchemeId.ETHNICITY, "Other"),
    ("arab", SchemeId.ETHNICITY, "Other"),
    ("No known disability", SchemeId.DISABILITY, "No Known Disability"),
    ("Specific learning difficulty", SchemeId.DISABILITY, "Specific Learning Difficulty"),
    ("Other disability", SchemeId.DISABILITY, "Other Disability"),
    ("No Known Disability", SchemeId.DISABILITY, "No Known Disability"),
    ("Specific Learning Difficulty", SchemeId.DISABILITY, "Specific Learning Difficulty"),
    ("Other Disability", SchemeId.DISABILITY, "Other Disability"),
    ("no known disability", SchemeId.DISABILITY, "No Known Disability"),
    ("specific learning difficulty", SchemeId.DISABILITY, "Specific Learning Difficulty"),
    ("other disability", SchemeId.DISABILITY, "Other Disability"),
    ("SLD", SchemeId.DISABILITY, "Specific Learning Difficulty"),
    ("sld", SchemeId.DISABILITY, "Specific Learning Difficulty"),
    ("Other", SchemeId.DISABILITY, "Other Disability"),
    ("other", SchemeId.DISABILITY, "Other Disability"),
    ("none", SchemeId.DISABILITY, "No Known Disability"),
    ("None", SchemeId.DISABILITY, "No Known Disability"),
    ("OTHER", SchemeId.DISABILITY, "Other Disability"),
    ("PASS", SchemeId.PFE, "Pass"),
    ("FAIL", SchemeId.PFE, "Fail"),
    ("E", SchemeId.PFE, "Excellent"),
    ("e", SchemeId.PFE, "Excellent"),
    ("Excellent", SchemeId.PFE, "Excellent"),
    ("excellent", SchemeId.PFE, "Excellent"),
    ("i", SchemeId.CIDK, "Incorrect"),
)

# Colour palette
RED = "#D92120"
ORANGE = "#E68B33"
GREEN = "#86BB6A"
BLUE = "#3D52A1"
TEAL = "#44AA77"
STEEL = "#4477AA"

# Colour for labels carried into a scheme they don't belong to
OUT_OF_SCHEME_COLOUR = "#D3D3D3"

# Colour for every level of an unknown scheme
UNKNOWN_COLOUR = BLUE

SCHEME_LEVELS: MappingProxyType[SchemeId, tuple[str, ...]] = MappingProxyType(
    {
        SchemeId.UBSE: ("Unsatisfactory", "Borderline", "Satisfactory", "Excellent"),
        SchemeId.USE: ("Unsatisfactory", "Satisfactory", "Excellent"),
        SchemeId.UBS: ("Unsatisfactory", "Borderline", "Satisfactory"),
        SchemeId.CIDK: ("Correct", "Incorrect", "Don't Know"),
        SchemeId.CNINC: ("Competent", "Needs Improvement", "Not Competent"),
        SchemeId.PFE: ("Excellent", "Pass", "Fail"),
        SchemeId.PF: ("Pass", "Fail"),
        SchemeId.GENDER: ("Female", "Male"),
        SchemeId.ETHNICITY: ("White", "Asian", "Other"),
        SchemeId.DISABILITY: (
            "No Known Disability",
            "Specific Learning Difficulty",
            "Other Disability",
        ),
    }
)

SCHEME_COLOURS: MappingProxyType[SchemeId, tuple[str, ...]] = MappingProxyType(
    {
        SchemeId.UBSE: (RED, ORANGE, GREEN, BLUE),
        SchemeId.USE: (RED, GREEN, BLUE),
        SchemeId.UBS: (RED, ORANGE, GREEN),
        SchemeId.CIDK: (GREEN, RED, ORANGE),
        SchemeId.CNINC: (GREEN, ORANGE, RED),
        SchemeId.PFE: (BLUE, GREEN, RED),
        SchemeId.PF: (GREEN, RED),
        SchemeId.GENDER: (TEAL, STEEL),
        SchemeId.ETHNICITY: (TEAL, TEAL, TEAL),
        SchemeId.DISABILITY: (TEAL, TEAL, TEAL),
    }
)

# Reduced schemes: (parent scheme, level dropped from the parent)
DERIVED_SCHEMES: MappingProxyType[SchemeId, tuple[SchemeId, str]] = MappingProxyType(
    {
        SchemeId.USE: (SchemeId.UBSE, "Borderline"),
        SchemeId.UBS: (SchemeId.UBSE, "Excellent"),
        SchemeId.PF: (SchemeId.PFE, "Excellent"),
    }
)
