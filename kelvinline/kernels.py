import numpy as np

# Kelvin solution for a point force in an infinite, homogeneous, isotropic
# plane strain body. g = -C log(r) is the scalar potential, g_x and g_y are
# its exact derivatives with respect to the observation coordinates.
def kelvin_point(obs_x, obs_y, src_x, src_y, fx, fy, mu, nu):
    x = np.asarray(obs_x, dtype = np.float64) - src_x
    y = np.asarray(obs_y, dtype = np.float64) - src_y
    C = 1.0 / (4 * np.pi * (1 - nu))
    r2 = x ** 2 + y ** 2

    # r == 0 is a genuine singularity, let the infs and nans through.
    with np.errstate(divide = 'ignore', invalid = 'ignore'):
        g = -C * 0.5 * np.log(r2)
        gx = -C * x / r2
        gy = -C * y / r2
        ux = fx / (2 * mu) * ((3 - 4 * nu) * g - x * gx) + fy / (2 * mu) * (-y * gx)
        uy = fx / (2 * mu) * (-x * gy) + fy / (2 * mu) * ((3 - 4 * nu) * g - y * gy)
    return ux, uy

def on_source_line(obs_x, obs_y, y0):
    obs_x = np.asarray(obs_x)
    obs_y = np.asarray(obs_y)
    return (obs_y == y0) & (obs_x >= -1.0) & (obs_x <= 1.0)
