"""Domain exceptions."""


class NoUsableDataError(ValueError):
    """The input holds no data the pipeline can aggregate."""
