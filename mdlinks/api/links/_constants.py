"""Constants for link extraction, matching and reporting."""

# Triple-backtick fence marker. An odd count before a position means "inside a fence".
CODE_FENCE = "```"

# Characters searched on each side of a match for an enclosing inline code span.
INLINE_CODE_WINDOW = 200

# Link prefixes that never point at a file in the tree.
EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "ftp://", "//")

# Structural similarity must beat this fraction of matching filename parts.
# Below it, abbreviations like "comp-fda-001" matched too many unrelated documents.
STRUCTURAL_MATCH_THRESHOLD = 0.5

# Structural matching only applies to filenames with at least this many hyphen parts.
STRUCTURAL_MIN_PARTS = 3

# Non-identifier names must share this many leading parts to be considered at all.
STRUCTURAL_PREFIX_PARTS = 3

# Disambiguation: proximity weight divided by (number of ".." hops + 1).
PROXIMITY_WEIGHT = 10.0

# Disambiguation: bonus per original link segment found in the candidate path.
SEGMENT_OVERLAP_BONUS = 5.0

# Strategy names recorded on corrections.
STRATEGY_EXACT = "exact"
STRATEGY_EXTENSION = "extension"
STRATEGY_CASE_INSENSITIVE = "case_insensitive"
STRATEGY_STRUCTURAL = "structural"
STRATEGY_PATH_PATTERN = "path_pattern"
STRATEGY_RENAME = "rename"

# Report categories, in precedence order.
CATEGORY_DEPRECATED = "deprecated"
CATEGORY_ARCHIVED = "archived"
CATEGORY_AMBIGUOUS = "ambiguous"
CATEGORY_AUTO_FIXABLE = "auto_fixable"
CATEGORY_MISSING = "missing"
CATEGORIES = (
    CATEGORY_DEPRECATED,
    CATEGORY_ARCHIVED,
    CATEGORY_AMBIGUOUS,
    CATEGORY_AUTO_FIXABLE,
    CATEGORY_MISSING,
)

DEPRECATED_SEGMENTS = frozenset({"deprecated"})
ARCHIVED_SEGMENTS = frozenset({"archive", "archived"})

# Summary preview limits.
MAX_AMBIGUOUS_TARGETS = 10
MAX_AMBIGUOUS_CANDIDATES = 4
MAX_AMBIGUOUS_REFERRERS = 2
MAX_MISSING_TARGETS = 15
MAX_MISSING_REFERRERS = 3
MAX_AUTO_FIXABLE_FILES = 10
