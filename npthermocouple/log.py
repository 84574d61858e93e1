import logging


class LogManager(object):
    """ Hands out the loggers used by the package modules, which all write
        through a single console handler
    """

    def __init__(self, log_level=logging.WARNING):
        self.log_level = log_level

        self.console_handler = logging.StreamHandler()
        self.console_handler.setLevel(self.log_level)

        self.formatter = logging.Formatter(
            '[%(name)s %(levelname)s] %(message)s')
        self.console_handler.setFormatter(self.formatter)

        self.loggers = {}

    def get_logger(self, module_name):
        """ Return the logger for a module, creating it on first use
        """
        if module_name in self.loggers:
            return self.loggers[module_name]
        log = logging.getLogger(module_name)
        log.setLevel(self.log_level)
        log.addHandler(self.console_handler)
        self.loggers[module_name] = log
        return log

    def set_level(self, level):
        """ Set the log level for all loggers that have been created.
            The level may be a number or a name such as "DEBUG".
        """
        level = _level_number(level)
        self.log_level = level
        self.console_handler.setLevel(level)
        for log in self.loggers.values():
            log.setLevel(level)


def _level_number(level):
    if isinstance(level, int):
        return level
    number = logging.getLevelName(str(level).upper())
    if not isinstance(number, int):
        raise ValueError("Unknown log level: %s" % level)
    return number


log_manager = LogManager()
