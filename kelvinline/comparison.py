import logging

import attr
import numpy as np

from kelvinline.reference import reference_field
from kelvinline.line_integral import (
    gauss_legendre_line, tanh_sinh_line, adaptive_line)
from kelvinline.errors import KelvinLineError
from kelvinline.util.timer import Timer

logger = logging.getLogger(__name__)

def _magnitude(u):
    return np.sqrt(u[0] ** 2 + u[1] ** 2)

def percent_residual(ref, num):
    """ 100 * (|u_ref| - |u_num|) / |u_ref|, per field point. """
    ref_mag = _magnitude(ref)
    with np.errstate(divide = 'ignore', invalid = 'ignore'):
        return 100.0 * (ref_mag - _magnitude(num)) / ref_mag

def relative_residual(ref, num):
    diff = (ref[0] - num[0], ref[1] - num[1])
    with np.errstate(divide = 'ignore', invalid = 'ignore'):
        return _magnitude(diff) / _magnitude(ref)

def max_residual(ref, num, mask = None):
    err = _magnitude((ref[0] - num[0], ref[1] - num[1]))
    if mask is not None:
        err = err[mask]
    return np.max(err)

def away_from_line(obs_y, y0, dist):
    return np.abs(np.asarray(obs_y) - y0) > dist

def run_gauss_legendre(cfg, obs_x, obs_y):
    return gauss_legendre_line(
        obs_x, obs_y, cfg.gl_order, cfg.params,
        raise_on_singular = cfg.raise_on_singular
    )

def run_tanh_sinh(cfg, obs_x, obs_y):
    return tanh_sinh_line(
        obs_x, obs_y, cfg.ts_step, cfg.params, L = cfg.ts_length,
        raise_on_singular = cfg.raise_on_singular
    )

def run_adaptive(cfg, obs_x, obs_y):
    return adaptive_line(
        obs_x, obs_y, cfg.params,
        epsabs = cfg.adaptive_epsabs, epsrel = cfg.adaptive_epsrel,
        limit = cfg.adaptive_limit, n_jobs = cfg.n_jobs
    )

producers = dict(
    gauss_legendre = run_gauss_legendre,
    tanh_sinh = run_tanh_sinh,
    adaptive = run_adaptive
)

@attr.s
class Comparison:
    obs_x = attr.ib()
    obs_y = attr.ib()
    reference = attr.ib()
    fields = attr.ib(factory = dict)
    errors = attr.ib(factory = dict)
    timings = attr.ib(factory = dict)

    def residuals(self, name):
        f = self.fields[name]
        num = (f.ux, f.uy)
        return dict(
            percent = percent_residual(self.reference, num),
            relative = relative_residual(self.reference, num)
        )

    def failures(self):
        return {name: f.failures for name, f in self.fields.items()}

def compare(cfg, obs_x, obs_y):
    obs_x, obs_y = np.broadcast_arrays(np.asarray(obs_x, dtype = np.float64), obs_y)
    t = Timer(output_fnc = logger.debug)
    ref = reference_field(obs_x, obs_y, cfg.params)
    out = Comparison(obs_x = obs_x, obs_y = obs_y, reference = ref)
    out.timings['reference'] = t.report('reference')

    for name in cfg.producers:
        try:
            out.fields[name] = producers[name](cfg, obs_x, obs_y)
        except (KelvinLineError, ValueError) as e:
            logger.error(name + ' failed: ' + str(e))
            out.errors[name] = e
        out.timings[name] = t.report(name)
    return out

def summarize(comparison, mask = None):
    summary = dict()
    for name, f in comparison.fields.items():
        num = (f.ux, f.uy)
        usable = ~f.flagged
        if mask is not None:
            usable &= mask
        pct = np.abs(percent_residual(comparison.reference, num))[usable]
        summary[name] = dict(
            max_abs_residual = max_residual(comparison.reference, num, usable)
                if np.any(usable) else np.nan,
            max_percent_residual = np.max(pct) if pct.size > 0 else np.nan,
            n_singular = int(np.sum(f.singular)),
            n_failures = len(f.failures),
            time = comparison.timings.get(name)
        )
    for name, e in comparison.errors.items():
        summary[name] = dict(error = str(e), time = comparison.timings.get(name))
    return summary
