"""Custom exceptions for the tracking context."""


class ProofIncompleteError(RuntimeError):
    """
    Raised when the final submission is requested before every step has an artifact.

    Attributes:
        first_locked_step: Index of the first step still missing its artifact
        route: Route of that step, where the user should be sent back to
    """

    def __init__(self, first_locked_step: int, route: str):
        self.first_locked_step = first_locked_step
        self.route = route
        super().__init__(
            f"Build track incomplete: step {first_locked_step} has no artifact ({route})"
        )
