import sympy as sp

# Symbolic form of the Kelvin line source. Only used offline, to check the
# hand-written closed form in kelvinline.reference and to re-derive it.

fx, fy = sp.symbols('fx, fy') # force components
mu = sp.symbols('mu') # shear modulus
nu = sp.symbols('nu') # poisson ratio
y0 = sp.symbols('y0') # ordinate of the source line

obs = sp.symbols('X, Y') # The observation point
t = sp.symbols('t') # The source point abscissa, integrated over [-1, 1]

# Observation minus source, along x with the line ordinate folded into y.
a, y = sp.symbols('a, y', real = True)

C = 1 / (4 * sp.pi * (1 - nu))

all_args = [obs[0], obs[1], t, y0, fx, fy, mu, nu]

def kelvin_exprs(x, y):
    r = sp.sqrt(x ** 2 + y ** 2)
    g = -C * sp.log(r)
    gx = sp.diff(g, x)
    gy = sp.diff(g, y)
    ux = fx / (2 * mu) * ((3 - 4 * nu) * g - x * gx) + fy / (2 * mu) * (-y * gx)
    uy = fx / (2 * mu) * (-x * gy) + fy / (2 * mu) * ((3 - 4 * nu) * g - y * gy)
    return ux, uy

def point_kernel():
    """
    The kernel in terms of the observation point (X, Y) and the source point
    (t, y0), with arguments ordered as all_args.
    """
    xs, ys = sp.symbols('xs, ys', real = True)
    exprs = kelvin_exprs(xs, ys)
    subs = {xs: obs[0] - t, ys: obs[1] - y0}
    return tuple(e.subs(subs) for e in exprs)

def antiderivatives():
    """
    Antiderivatives in a = X - t of the pieces of the kernel, keyed by the
    integrand they belong to. These are the pieces used by
    kelvinline.reference.
    """
    s = sp.Abs(y)
    r2 = a ** 2 + y ** 2
    return {
        'g': (
            -C * sp.log(sp.sqrt(r2)),
            -C / 2 * (a * sp.log(r2) - 2 * a + 2 * s * sp.atan(a / s))
        ),
        '-x*gx': (
            C * a ** 2 / r2,
            C * (a - s * sp.atan(a / s))
        ),
        '-y*gx': (
            C * a * y / r2,
            C / 2 * y * sp.log(r2)
        ),
        '-y*gy': (
            C * y ** 2 / r2,
            C * s * sp.atan(a / s)
        ),
    }

def antiderivative_residuals():
    """
    d/da (antiderivative) - integrand for each piece, lambdified as
    functions of (a, y, nu). All of them should vanish for y != 0.
    """
    out = dict()
    for name, (integrand, F) in antiderivatives().items():
        resid = sp.diff(F, a) - integrand
        out[name] = sp.lambdify((a, y, nu), resid, 'numpy')
    return out

def line_integral(obs_x, obs_y, fx_val, fy_val, mu_val, nu_val, y0_val = 0.0,
        digits = 15):
    """
    Integrate the symbolic kernel over t in [-1, 1] numerically at a
    single observation point.
    """
    vals = {
        obs[0]: obs_x, obs[1]: obs_y, y0: y0_val,
        fx: fx_val, fy: fy_val, mu: mu_val, nu: nu_val
    }
    return tuple(
        float(sp.Integral(e.subs(vals), (t, -1, 1)).evalf(digits))
        for e in point_kernel()
    )

def lambdify_point_kernel():
    return [sp.lambdify(all_args, e, 'numpy') for e in point_kernel()]
