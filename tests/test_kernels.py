import numpy as np

from kelvinline.kernels import kelvin_point, on_source_line

params = (0.3, -1.0, 1.0, 0.25)

def test_linear_in_force():
    obs_x, obs_y = np.meshgrid(np.linspace(-2, 2, 7), np.linspace(0.1, 1.5, 5))
    ux, uy = kelvin_point(obs_x, obs_y, 0.2, 0.0, 0.3, -1.0, 1.0, 0.25)
    for s in [-1.0, 2.5, 0.0]:
        sux, suy = kelvin_point(obs_x, obs_y, 0.2, 0.0, s * 0.3, s * -1.0, 1.0, 0.25)
        np.testing.assert_almost_equal(sux, s * ux, 14)
        np.testing.assert_almost_equal(suy, s * uy, 14)

def test_superposition_of_forces():
    x, y = 0.7, -0.4
    ux1, uy1 = kelvin_point(x, y, 0.0, 0.0, 1.0, 0.0, 1.0, 0.25)
    ux2, uy2 = kelvin_point(x, y, 0.0, 0.0, 0.0, 1.0, 1.0, 0.25)
    ux, uy = kelvin_point(x, y, 0.0, 0.0, 2.0, -3.0, 1.0, 0.25)
    np.testing.assert_almost_equal(ux, 2 * ux1 - 3 * ux2, 14)
    np.testing.assert_almost_equal(uy, 2 * uy1 - 3 * uy2, 14)

def test_inverse_shear_modulus():
    ux1, uy1 = kelvin_point(0.5, 0.5, 0.0, 0.0, *params)
    ux2, uy2 = kelvin_point(0.5, 0.5, 0.0, 0.0, 0.3, -1.0, 4.0, 0.25)
    np.testing.assert_almost_equal(ux2, ux1 / 4.0, 15)
    np.testing.assert_almost_equal(uy2, uy1 / 4.0, 15)

def test_translation_invariance():
    a = kelvin_point(1.3, 0.4, 0.2, -0.1, *params)
    b = kelvin_point(1.1, 0.5, 0.0, 0.0, *params)
    np.testing.assert_almost_equal(a, b, 14)

def test_point_reflection_symmetry():
    # The kernel only depends on x and y through even combinations.
    a = kelvin_point(0.3, 0.8, 0.0, 0.0, *params)
    b = kelvin_point(-0.3, -0.8, 0.0, 0.0, *params)
    np.testing.assert_almost_equal(a, b, 15)

def test_hand_value():
    # fx = 0, fy = 1, mu = 1/2, nu = 1/4 at (x, y) = (0, 1):
    # C = 1 / (3 pi), g = 0, g_x = 0, g_y = -C
    # ux = 0, uy = -y g_y = C
    ux, uy = kelvin_point(0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.5, 0.25)
    np.testing.assert_almost_equal(ux, 0.0)
    np.testing.assert_almost_equal(uy, 1.0 / (3 * np.pi))

def test_broadcast_shapes():
    obs_x = np.zeros((3, 4)) + 0.5
    obs_y = np.ones((3, 4))
    ux, uy = kelvin_point(obs_x, obs_y, 0.0, 0.0, *params)
    assert(ux.shape == (3, 4))
    assert(uy.shape == (3, 4))
    np.testing.assert_almost_equal(ux, ux[0,0])

def test_coincident_is_not_finite():
    ux, uy = kelvin_point(
        np.array([0.25, 1.0]), np.array([0.0, 1.0]), 0.25, 0.0, *params
    )
    assert(not np.isfinite(ux[0]))
    assert(not np.isfinite(uy[0]))
    assert(np.isfinite(ux[1]) and np.isfinite(uy[1]))

def test_coincident_x_force_is_infinite():
    ux, uy = kelvin_point(0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0, 0.25)
    assert(np.isnan(ux) or np.isinf(ux))

def test_matches_symbolic_kernel():
    from kelvinline.derive import lambdify_point_kernel
    fncs = lambdify_point_kernel()
    np.random.seed(11)
    for i in range(10):
        X, Y, t = np.random.rand(3) * 2 - 1
        fx, fy = np.random.randn(2)
        mu = np.random.rand() + 0.5
        nu = np.random.rand() * 0.45
        y0 = 0.1
        ux, uy = kelvin_point(X, Y, t, y0, fx, fy, mu, nu)
        np.testing.assert_almost_equal(ux, fncs[0](X, Y, t, y0, fx, fy, mu, nu), 12)
        np.testing.assert_almost_equal(uy, fncs[1](X, Y, t, y0, fx, fy, mu, nu), 12)

def test_on_source_line():
    obs_x = np.array([-1.0, 0.0, 1.0, 1.5, 0.0])
    obs_y = np.array([0.0, 0.0, 0.0, 0.0, 1e-12])
    np.testing.assert_array_equal(
        on_source_line(obs_x, obs_y, 0.0), [True, True, True, False, False]
    )
