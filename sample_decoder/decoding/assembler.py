"""Folding of canonical sample bytes into integers."""


def assemble(canonical: bytes) -> int:
    """Treat big-endian ``canonical`` bytes as one unsigned integer."""
    number = 0
    for byte in canonical:
        number = (number << 8) | byte
    return number


def assemble_magnitude(canonical: bytes) -> int:
    """Assemble ``canonical`` with the sign bit of the leading byte cleared."""
    if not canonical:
        return 0
    return assemble(bytes([canonical[0] & 0x7F]) + canonical[1:])
