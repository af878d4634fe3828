import numpy as np

def make_grid(n_pts = 51, x_range = (-2.0, 2.0), y_range = (-1.5, 1.5), mode = 'grid'):
    x = np.linspace(x_range[0], x_range[1], n_pts)
    if mode == 'grid':
        y = np.linspace(y_range[0], y_range[1], n_pts)
        obs_x, obs_y = np.meshgrid(x, y)
        return obs_x, obs_y
    elif mode == 'line':
        return x, np.zeros_like(x)
    else:
        raise ValueError("grid mode must be 'grid' or 'line', got " + repr(mode))
