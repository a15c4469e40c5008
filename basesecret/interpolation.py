import math
from basesecret.errors import DivisionNotExact, DuplicatePoint, NoInverse

def exact_divide(dividend, divisor):
    """
    Integer division that refuses to truncate. The divisor must be non-zero.
    """
    quotient, remainder = divmod(dividend, divisor)
    if remainder:
        raise DivisionNotExact(dividend, divisor)
    return quotient

def lagrange_basis_at_zero(xs, j):
    """
    Returns (numerator, denominator) of the j-th Lagrange basis polynomial
    evaluated at x=0, with the denominator made positive.
    """
    xj = xs[j]
    numerator = 1
    denominator = 1
    for i, xi in enumerate(xs):
        if i == j:
            continue
        # For x=0: (0 - xi)
        numerator *= -xi
        denominator *= xj - xi

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator
    return numerator, denominator

def lagrange_at_zero(points):
    """
    Evaluates the polynomial through all given (x, y) points at x=0 over the
    integers. Every term is scaled to the least common multiple of the basis
    denominators so the only division is the final one, which must be exact.
    """
    if not points:
        raise ValueError("Cannot interpolate zero points.")

    xs = [x for x, _ in points]
    seen = set()
    for x in xs:
        if x in seen:
            raise DuplicatePoint(x)
        seen.add(x)

    bases = [lagrange_basis_at_zero(xs, j) for j in range(len(xs))]
    common = math.lcm(*(denominator for _, denominator in bases))

    total = 0
    for (_, yj), (numerator, denominator) in zip(points, bases):
        total += yj * numerator * (common // denominator)

    return exact_divide(total, common)

def extended_gcd(a, b):
    """
    Returns (g, x, y) such that a*x + b*y == g == gcd(a, b), with g >= 0.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y

    if old_r < 0:
        return -old_r, -old_x, -old_y
    return old_r, old_x, old_y

def mod_inverse(a, m):
    """Modular inverse of a in [0, m), for finite-field interpolation."""
    if m < 1:
        raise ValueError(f"Modulus must be positive, got {m}")
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise NoInverse(a, m)
    return x % m
