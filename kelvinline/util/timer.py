import time

import kelvinline.util.logging as kl_log

class Timer(object):
    def __init__(self, tabs = 0, silent = False, prefix = "", output_fnc = None):
        self.tabs = tabs
        self.silent = silent
        self.prefix = prefix
        self.output_fnc = output_fnc
        if self.output_fnc is None:
            self.output_fnc = kl_log.get_caller_logger().debug
        self.start = time.time()

    def restart(self):
        self.start = time.time()

    def elapsed(self):
        return time.time() - self.start

    def report(self, name, should_restart = True):
        dt = self.elapsed()
        if not self.silent:
            text = '    ' * self.tabs
            if self.prefix != "":
                text += self.prefix + ' -- '
            text += name + " took " + str(dt)
            self.output_fnc(text)
        if should_restart:
            self.restart()
        return dt
