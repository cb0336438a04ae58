"""Type-level constraints for Person fields."""

# Ages are unsigned 32-bit integers.
MIN_AGE = 0
U32_MAX = 2**32 - 1
MAX_AGE = U32_MAX
