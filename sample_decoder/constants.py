"""Constants for Sample Decoder."""

VERSION = "0.1.0"

# Supported PCM bit depth bounds (inclusive)
MIN_BITS_PER_SAMPLE = 1
MAX_BITS_PER_SAMPLE = 128

# A-law expansion parameter
A_LAW_A = 87.6

# µ-law expansion parameter
MU_LAW_MU = 255.0

# CLI exit codes
EXIT_USAGE = 1
EXIT_NO_DATASET = 2
