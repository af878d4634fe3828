import numpy as np
import scipy.special

# Closed form of the Kelvin kernel integrated over the source line
# x0 in [-1, 1], y0 fixed. With a = x - x0 and s = |y - y0| the pieces of
# the kernel have the antiderivatives below. xlogy and s * arctan2(a, s)
# give the exact limits 0 * log(0) = 0 and s * atan(a / s) -> 0 as s -> 0,
# so the field is finite on the source line too.

def _G(a, y, s, C):
    return -0.5 * C * (
        scipy.special.xlogy(a, a ** 2 + y ** 2) - 2 * a + 2 * s * np.arctan2(a, s)
    )

def _Pxx(a, y, s, C):
    return C * (a - s * np.arctan2(a, s))

def _Pxy(a, y, s, C):
    return 0.5 * C * scipy.special.xlogy(y, a ** 2 + y ** 2)

def _Pyy(a, y, s, C):
    return C * s * np.arctan2(a, s)

def _definite(F, obs_x, y, s, C):
    return F(obs_x + 1.0, y, s, C) - F(obs_x - 1.0, y, s, C)

def reference(obs_x, obs_y, fx, fy, mu, y0, nu):
    obs_x = np.asarray(obs_x, dtype = np.float64)
    y = np.asarray(obs_y, dtype = np.float64) - y0
    s = np.abs(y)
    C = 1.0 / (4 * np.pi * (1 - nu))

    G = _definite(_G, obs_x, y, s, C)
    Pxx = _definite(_Pxx, obs_x, y, s, C)
    Pxy = _definite(_Pxy, obs_x, y, s, C)
    Pyy = _definite(_Pyy, obs_x, y, s, C)

    ux = fx / (2 * mu) * ((3 - 4 * nu) * G + Pxx) + fy / (2 * mu) * Pxy
    uy = fx / (2 * mu) * Pxy + fy / (2 * mu) * ((3 - 4 * nu) * G + Pyy)
    return ux, uy

def reference_field(obs_x, obs_y, params):
    return reference(
        obs_x, obs_y, params.fx, params.fy, params.mu, params.y0, params.nu
    )
