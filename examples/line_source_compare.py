import sys
import logging
import numpy as np

import kelvinline
from kelvinline.cfg import make_config
from kelvinline.grid import make_grid
from kelvinline.comparison import compare, summarize, away_from_line

from kelvinline.util.logging import setup_root_logger
logger = setup_root_logger(__name__)

def main(mode = 'grid', n_pts = 51, verbose = False):
    log_level = logging.DEBUG if verbose else logging.INFO
    kelvinline.logger.setLevel(log_level)
    logger.setLevel(log_level)

    cfg = make_config(mu = 1.0, nu = 0.25, fx = 0.0, fy = -1.0, y0 = 0.0)
    obs_x, obs_y = make_grid(n_pts, mode = mode)
    out = compare(cfg, obs_x, obs_y)

    mask = None
    if mode == 'grid':
        mask = away_from_line(obs_y, cfg.params.y0, 0.1)
    for name, s in summarize(out, mask).items():
        logger.info(name + ': ' + str(s))

    ref_mag = np.sqrt(out.reference[0] ** 2 + out.reference[1] ** 2)
    logger.info('max |u| analytical: ' + str(np.max(ref_mag)))
    return out

if __name__ == "__main__":
    mode = 'grid'
    if len(sys.argv) > 1:
        mode = sys.argv[1]
    main(mode = mode)
