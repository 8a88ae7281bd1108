class InvalidArgumentError(ValueError):
    pass


class OutOfBoundsError(IndexError):
    pass


def validate_step(n):
    # bool is an int subclass but never a valid step
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidArgumentError("Parameter n must be a positive integer")
    return n


def validate_mode(mode, allowed):
    if mode not in allowed:
        raise InvalidArgumentError(f"Invalid mode: {mode}")
    return mode
