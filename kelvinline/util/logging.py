import logging
import sys

def get_caller_logger():
    mod_name = sys._getframe(2).f_globals['__name__']
    return logging.getLogger(mod_name)

def setup_root_logger(log_name, level = logging.DEBUG):
    L = logging.getLogger(log_name)
    L.setLevel(level)
    if not L.handlers:
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(level)
        formatter = logging.Formatter(
            "[%(relativeCreated)d:%(levelname)s:%(name)s]\n    %(message)s",
            datefmt='%j:%H:%M:%S'
        )
        ch.setFormatter(formatter)
        L.addHandler(ch)
    return L
