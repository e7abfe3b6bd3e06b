"""Default values and contract limits shared across the package."""

# Truncation limits, in characters
MAX_BODY_LENGTH = 50_000
MAX_ATTACHMENT_TEXT_LENGTH = 100_000
TRUNCATION_MARKER = "\n[TRUNCATED]"

# Inline image ceiling (10 MiB)
MAX_INLINE_IMAGE_BYTES = 10 * 1024 * 1024

MAX_FILENAME_LENGTH = 200
FALLBACK_FILENAME = "attachment"

BOUNDARY_PREFIX = "----UNTRUSTED_CONTENT_"
BOUNDARY_RANDOM_BYTES = 8

DEFAULT_MAX_RESULTS = 10
MAX_RESULTS_LIMIT = 100
