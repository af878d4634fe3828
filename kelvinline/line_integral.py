import functools
import logging

import attr
import numpy as np
import scipy.integrate
from joblib import Parallel, delayed

from kelvinline.kernels import kelvin_point, on_source_line
from kelvinline.quadrature import gaussxw, tanh_sinh_terms
from kelvinline.errors import SingularEvaluation, QuadratureNonConvergence
from kelvinline.util.timer import Timer

logger = logging.getLogger(__name__)

components = ('ux', 'uy')

@attr.s
class NonConvergence:
    index = attr.ib()
    component = attr.ib()
    message = attr.ib()
    estimate = attr.ib()
    abserr = attr.ib()

@attr.s
class DisplacementField:
    ux = attr.ib()
    uy = attr.ib()
    singular = attr.ib()
    failures = attr.ib(factory = list)

    @property
    def flagged(self):
        """
        Points that are on the source line, came out non-finite or failed to
        converge.
        """
        out = np.array(self.singular | ~np.isfinite(self.ux) | ~np.isfinite(self.uy))
        flat = out.reshape(-1)
        for f in self.failures:
            flat[f.index] = True
        return out

    def check(self):
        if len(self.failures) > 0:
            raise QuadratureNonConvergence(self.failures)
        return self

def accumulate(total, term):
    return total[0] + term[0], total[1] + term[1]

def line_quadrature(obs_x, obs_y, rule_terms, params):
    """
    Sum of the kernel over (node, weight) pairs, for all observation points
    at once. rule_terms can be any iterable, including a generator.
    """
    zero = np.zeros(np.shape(obs_x))
    fx, fy, mu, nu = params.kernel_args()
    weighted = (
        tuple(w * u for u in kelvin_point(obs_x, obs_y, x, params.y0, fx, fy, mu, nu))
        for x, w in rule_terms
    )
    return functools.reduce(accumulate, weighted, (zero, zero.copy()))

def flag_singular(name, obs_x, obs_y, ux, uy, params, raise_on_singular):
    singular = on_source_line(obs_x, obs_y, params.y0)
    n_singular = int(np.sum(singular))
    if n_singular > 0:
        if raise_on_singular:
            raise SingularEvaluation(n_singular, name)
        logger.warning(
            name + ': ' + str(n_singular) +
            ' field point(s) on the source line set to nan'
        )
        ux = np.where(singular, np.nan, ux)
        uy = np.where(singular, np.nan, uy)
    return DisplacementField(ux = ux, uy = uy, singular = singular)

def gauss_legendre_line(obs_x, obs_y, n, params, raise_on_singular = False):
    obs_x, obs_y = np.broadcast_arrays(np.asarray(obs_x, dtype = np.float64), obs_y)
    qx, qw = gaussxw(n)
    logger.debug('gauss-legendre line integral with ' + str(n) + ' nodes')
    ux, uy = line_quadrature(obs_x, obs_y, zip(qx, qw), params)
    return flag_singular(
        'gauss_legendre', obs_x, obs_y, ux, uy, params, raise_on_singular
    )

def tanh_sinh_line(obs_x, obs_y, h, params, L = 2.0, raise_on_singular = False):
    obs_x, obs_y = np.broadcast_arrays(np.asarray(obs_x, dtype = np.float64), obs_y)
    logger.debug('tanh-sinh line integral with h = ' + str(h) + ', L = ' + str(L))
    ux, uy = line_quadrature(obs_x, obs_y, tanh_sinh_terms(h, L), params)
    return flag_singular(
        'tanh_sinh', obs_x, obs_y, ux, uy, params, raise_on_singular
    )

def adaptive_component(X, Y, component, params, epsabs, epsrel, limit):
    fx, fy, mu, nu = params.kernel_args()
    def f(t):
        return kelvin_point(X, Y, t, params.y0, fx, fy, mu, nu)[component]
    # With full_output, quad returns a fourth element, the message, only
    # when it could not meet the tolerance.
    res = scipy.integrate.quad(
        f, -1.0, 1.0, epsabs = epsabs, epsrel = epsrel,
        limit = limit, full_output = 1
    )
    est, abserr = res[0], res[1]
    msg = None
    if len(res) > 3:
        msg = res[3]
    elif not np.isfinite(est):
        msg = 'non-finite integral estimate, the integrand hit the singularity'
    return est, abserr, msg

def adaptive_point(X, Y, params, epsabs, epsrel, limit):
    return [
        adaptive_component(X, Y, d, params, epsabs, epsrel, limit)
        for d in range(2)
    ]

def adaptive_line(obs_x, obs_y, params, epsabs = 1.49e-8, epsrel = 1.49e-8,
        limit = 50, n_jobs = 1):
    obs_x, obs_y = np.broadcast_arrays(np.asarray(obs_x, dtype = np.float64), obs_y)
    flat_x = obs_x.reshape(-1)
    flat_y = obs_y.reshape(-1)

    logger.debug(
        'adaptive line integral over ' + str(flat_x.shape[0]) +
        ' points with n_jobs = ' + str(n_jobs)
    )
    t = Timer()
    results = Parallel(n_jobs = n_jobs)(
        delayed(adaptive_point)(X, Y, params, epsabs, epsrel, limit)
        for X, Y in zip(flat_x, flat_y)
    )
    t.report("adaptive quadrature")

    out = np.empty((2, flat_x.shape[0]))
    failures = []
    for i, point_res in enumerate(results):
        for d, (est, abserr, msg) in enumerate(point_res):
            out[d, i] = est
            if msg is not None:
                failures.append(NonConvergence(
                    index = i, component = components[d], message = msg,
                    estimate = est, abserr = abserr
                ))

    if len(failures) > 0:
        logger.warning(
            'adaptive: ' + str(len(failures)) +
            ' point/component integral(s) did not converge'
        )
    return DisplacementField(
        ux = out[0].reshape(obs_x.shape),
        uy = out[1].reshape(obs_x.shape),
        singular = on_source_line(obs_x, obs_y, params.y0),
        failures = failures
    )
