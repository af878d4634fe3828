import attr

producer_names = ('gauss_legendre', 'tanh_sinh', 'adaptive')

def check_producers(instance, attribute, value):
    unknown = [p for p in value if p not in producer_names]
    if len(unknown) > 0:
        raise ValueError(
            'unknown producers: ' + ', '.join(unknown) +
            ' (choose from ' + ', '.join(producer_names) + ')'
        )

defaults = dict(
    mu = 1.0,
    nu = 0.25,
    fx = 0.0,
    fy = -1.0,
    y0 = 0.0,

    gl_order = 39,

    ts_step = 0.05,
    ts_length = 2.0,

    # scipy.integrate.quad defaults
    adaptive_epsabs = 1.49e-8,
    adaptive_epsrel = 1.49e-8,
    adaptive_limit = 50,
    n_jobs = 1,

    producers = producer_names,
    raise_on_singular = False,
)

@attr.s(frozen = True)
class ElasticParams:
    mu = attr.ib()
    nu = attr.ib()
    fx = attr.ib()
    fy = attr.ib()
    y0 = attr.ib(default = 0.0)

    def kernel_args(self):
        return self.fx, self.fy, self.mu, self.nu

@attr.s(frozen = True)
class Config:
    params = attr.ib()
    gl_order = attr.ib()
    ts_step = attr.ib()
    ts_length = attr.ib()
    adaptive_epsabs = attr.ib()
    adaptive_epsrel = attr.ib()
    adaptive_limit = attr.ib()
    n_jobs = attr.ib()
    producers = attr.ib(converter = tuple, validator = check_producers)
    raise_on_singular = attr.ib()

def make_config(**kwargs):
    unknown = set(kwargs) - set(defaults)
    if len(unknown) > 0:
        raise TypeError('unknown config options: ' + ', '.join(sorted(unknown)))
    vals = dict(defaults)
    vals.update(kwargs)
    params = ElasticParams(
        mu = vals.pop('mu'),
        nu = vals.pop('nu'),
        fx = vals.pop('fx'),
        fy = vals.pop('fy'),
        y0 = vals.pop('y0')
    )
    return Config(params = params, **vals)
