from kelvinline.util.logging import setup_root_logger
logger = setup_root_logger(__name__)

from kelvinline.cfg import ElasticParams, Config, make_config
from kelvinline.errors import (
    KelvinLineError,
    SingularEvaluation,
    RuleConstructionFailure,
    QuadratureNonConvergence)
from kelvinline.kernels import kelvin_point
from kelvinline.quadrature import gaussxw, tanh_sinh, tanh_sinh_terms
from kelvinline.reference import reference
from kelvinline.line_integral import (
    DisplacementField,
    NonConvergence,
    gauss_legendre_line,
    tanh_sinh_line,
    adaptive_line)
from kelvinline.grid import make_grid
from kelvinline.comparison import compare, summarize
