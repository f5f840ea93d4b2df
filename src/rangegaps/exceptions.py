class InvalidRangeError(ValueError):
    pass
