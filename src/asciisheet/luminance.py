# JFIF (full-range BT.601) luma coefficients in 16.16 fixed point
_R_COEFF = 19595
_G_COEFF = 38470
_B_COEFF = 7471
_ROUNDING = 1 << 15


def luma(r, g, b):
    """Y component of the YCbCr conversion, in [0, 255].

    Works on plain ints and on numpy integer arrays alike.
    """
    return (_R_COEFF * r + _G_COEFF * g + _B_COEFF * b + _ROUNDING) >> 16


def bucket_index(y: int, count: int) -> int:
    """Map a luma value onto one of ``count`` buckets, darkest first."""
    if count < 1:
        raise ValueError(f"bucket count must be positive, got {count}")
    index = int((y / 255) * (count - 1))
    return min(max(index, 0), count - 1)


def quantize(rgb: tuple[int, int, int], count: int) -> int:
    r, g, b = (int(c) for c in rgb)
    return bucket_index(luma(r, g, b), count)
