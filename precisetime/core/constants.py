from typing import Final

# Unit conversions. Everything is an exact integer ratio.
NS_PER_SECOND: Final[int] = 1_000_000_000
US_PER_SECOND: Final[int] = 1_000_000
MS_PER_SECOND: Final[int] = 1_000
NS_PER_MS: Final[int] = 1_000_000
US_PER_MS: Final[int] = 1_000
NS_PER_US: Final[int] = 1_000

# Range of a signed 64-bit seconds field (time_t on LP64)
INT64_MIN: Final[int] = -(2 ** 63)
INT64_MAX: Final[int] = 2 ** 63 - 1
