class KelvinLineError(Exception):
    pass

class SingularEvaluation(KelvinLineError):
    def __init__(self, n_pts, producer = ''):
        super(SingularEvaluation, self).__init__(
            "%s: %d field point(s) lie on the source line" % (producer, n_pts)
        )
        self.n_pts = n_pts
        self.producer = producer

class RuleConstructionFailure(KelvinLineError):
    def __init__(self, order, max_update):
        super(RuleConstructionFailure, self).__init__(
            "Gauss-Legendre root finding did not converge for order %d "
            "(last Newton update %e)" % (order, max_update)
        )
        self.order = order
        self.max_update = max_update

class QuadratureNonConvergence(KelvinLineError):
    def __init__(self, failures):
        super(QuadratureNonConvergence, self).__init__(
            "adaptive quadrature did not converge for %d point/component pair(s)"
            % len(failures)
        )
        self.failures = failures
