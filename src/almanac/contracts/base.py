"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for internal
invariants.
"""

from almanac.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a pipeline contract.

    Fail-fast: no recovery, no fallback, no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, ContractViolation is raised.

    message : str
        Error message explaining the contract violation (for debugging).

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(len(pipeline.stages) == 7, "Pipeline contract: seven stages expected")
    """
    if not condition:
        raise ContractViolation(message)
