import numpy as np
import scipy.linalg

from kelvinline.errors import RuleConstructionFailure

def legendre_and_prev(n, x):
    """
    Evaluate P_n(x) and P_{n-1}(x) with the three-term recurrence
        j P_j = (2j - 1) x P_{j-1} - (j - 1) P_{j-2}
    """
    p = np.ones_like(x)
    p_prev = np.zeros_like(x)
    for j in range(1, n + 1):
        p_prev2 = p_prev
        p_prev = p
        p = ((2 * j - 1) * x * p_prev - (j - 1) * p_prev2) / j
    return p, p_prev

def legendre_deriv(n, x, p, p_prev):
    return n * (x * p - p_prev) / (x * x - 1)

# Derives the n-point gauss quadrature rule by Newton iteration on the roots
# of P_n. Only the roots in [0, 1) are iterated and the rest are mirrored,
# so the rule is exactly symmetric.
def gaussxw(n, tol = 1e-14, max_iter = 100):
    if not isinstance(n, (int, np.integer)) or n < 1:
        raise ValueError('quadrature order must be an integer >= 1, got ' + repr(n))
    m = (n + 1) // 2
    i = np.arange(1, m + 1)
    z = np.cos(np.pi * (i - 0.25) / (n + 0.5))

    max_update = np.inf
    for it in range(max_iter):
        p, p_prev = legendre_and_prev(n, z)
        dz = p / legendre_deriv(n, z, p, p_prev)
        z = z - dz
        max_update = np.max(np.abs(dz))
        if max_update <= tol:
            break
    else:
        raise RuleConstructionFailure(n, max_update)

    if n % 2 == 1:
        z[-1] = 0.0
    p, p_prev = legendre_and_prev(n, z)
    pp = legendre_deriv(n, z, p, p_prev)
    w_half = 2.0 / ((1 - z * z) * pp * pp)

    # z is decreasing, so -z is the increasing negative half.
    x = np.empty(n)
    w = np.empty(n)
    x[:m] = -z
    w[:m] = w_half
    x[n - m:] = z[::-1]
    w[n - m:] = w_half[::-1]
    return x, w

# Golub-Welsch: the nodes are the eigenvalues of the Jacobi matrix of the
# Legendre recurrence.
def gaussxw_eig(n):
    k = np.arange(1.0, n)
    a_band = np.zeros((2, n))
    a_band[1, 0:n-1] = k / np.sqrt(4 * k * k - 1)
    x, V = scipy.linalg.eig_banded(a_band, lower = True)
    w = 2 * np.real(np.power(V[0,:], 2))
    return x, w

# Change the domain of integration for a quadrature rule
def map_to(qr, interval):
    x01 = (qr[0] + 1) / 2
    outx = interval[0] + (interval[1] - interval[0]) * x01
    outw = (qr[1] / 2) * (interval[1] - interval[0])
    return outx, outw

# Integrate!
def quadrature(f, qr):
    return sum(f(qr[0]) * qr[1])

def tanh_sinh_terms(h, L = 2.0):
    """
    Yields the (node, weight) pairs of the truncated tanh-sinh rule on [-1, 1]
        x_k = tanh(pi/2 sinh(k h))
        w_k = (pi/2 h cosh(k h)) / cosh(pi/2 sinh(k h)) ** 2
    for k = -n, ..., n with n = floor(L / h). The terms decay double
    exponentially, so L controls the truncation error and h the
    discretization error.
    """
    if h <= 0:
        raise ValueError('tanh-sinh step size must be positive, got ' + str(h))
    if L < 0:
        raise ValueError('tanh-sinh truncation length must be >= 0, got ' + str(L))
    n = int(np.floor(L / h))
    for k in range(-n, n + 1):
        t = k * h
        u = 0.5 * np.pi * np.sinh(t)
        yield np.tanh(u), 0.5 * h * np.pi * np.cosh(t) / np.cosh(u) ** 2

def tanh_sinh(h, L = 2.0):
    terms = list(tanh_sinh_terms(h, L))
    return np.array([t[0] for t in terms]), np.array([t[1] for t in terms])
