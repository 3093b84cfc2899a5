"""Package‑wide constants, difficulty tables and demo assets."""

# Interactive input bounds (slider ranges); not used by the algebra itself.
PARAMETER_BOUNDS: dict[str, dict[str, float]] = {
    "a": {"min": -5, "max": 5},
    "d": {"min": -10, "max": 10},
    "e": {"min": -10, "max": 10},
}

NORMAL_FORM_BOUNDS: dict[str, dict[str, float]] = {
    "a": {"min": -5, "max": 5},
    "b": {"min": -100, "max": 100},
    "c": {"min": -100, "max": 100},
}

DEFAULT_SEED = 1337

# --- difficulty tables -------------------------------------------------------
EASY_RANGE: tuple[int, int] = (-5, 5)
MEDIUM_A_VALUES: tuple[int, ...] = (-2, -1, 1, 2, 3)
HARD_FRACTIONAL_VALUES: tuple[float, ...] = (
    -4.5, -3.5, -2.5, -1.5, -0.5, 0.5, 1.5, 2.5, 3.5, 4.5,
)

# Offsets keep topics that share a seed from drawing identical parameters.
NORMAL_TO_VERTEX_SEED_OFFSET = 7
TRANSFORMATION_SEED_OFFSET = 19
COMPLETING_SQUARE_SEED_OFFSET = 31
EXPANDING_SEED_OFFSET = 41
FACTORING_SEED_OFFSET = 53
REARRANGING_SEED_OFFSET = 67

# Blanks whose answers may be non-terminating decimals.
VERTEX_TOLERANCE = 0.001
COMPLETING_SQUARE_TOLERANCE = 0.01

# --- persistence -------------------------------------------------------------
STORAGE_KEY = "parabola-progress"
PROGRESS_PATH_ENV = "PARABOLA_PROGRESS_PATH"
DEFAULT_PROGRESS_FILE = "~/.parabola_engine/progress.json"

# --- demo assets -------------------------------------------------------------
DEMO_TOPIC = "binomial-expansion"
DEMO_DIFFICULTY = "medium"

__all__ = [
    "PARAMETER_BOUNDS",
    "NORMAL_FORM_BOUNDS",
    "DEFAULT_SEED",
    "EASY_RANGE",
    "MEDIUM_A_VALUES",
    "HARD_FRACTIONAL_VALUES",
    "NORMAL_TO_VERTEX_SEED_OFFSET",
    "TRANSFORMATION_SEED_OFFSET",
    "COMPLETING_SQUARE_SEED_OFFSET",
    "EXPANDING_SEED_OFFSET",
    "FACTORING_SEED_OFFSET",
    "REARRANGING_SEED_OFFSET",
    "VERTEX_TOLERANCE",
    "COMPLETING_SQUARE_TOLERANCE",
    "STORAGE_KEY",
    "PROGRESS_PATH_ENV",
    "DEFAULT_PROGRESS_FILE",
    "DEMO_TOPIC",
    "DEMO_DIFFICULTY",
]
