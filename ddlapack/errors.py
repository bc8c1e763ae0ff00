"""Errors raised for illegal arguments to the routines."""


class IllegalArgumentError(ValueError):
    """An argument passed to a routine had an illegal value.

    ``position`` is the one-based number of the offending parameter in the
    routine's conventional argument list.
    """

    def __init__(self, routine: str, position: int) -> None:
        self.routine = routine.strip()
        self.position = position
        super().__init__(
            f"On entry to {self.routine} parameter number {position:2d} "
            "had an illegal value"
        )


def xerbla(routine: str, info: int) -> None:
    """Report an illegal value of parameter ``info`` of ``routine``."""
    raise IllegalArgumentError(routine, info)