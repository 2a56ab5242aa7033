# pto_planner/io_layer/errors.py


class InputError(ValueError):
    """A settings or schedule file is missing, unreadable or malformed"""
