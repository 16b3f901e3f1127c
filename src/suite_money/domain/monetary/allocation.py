from __future__ import annotations

import logging
from typing import Sequence

from suite_money.domain.monetary.errors import AllocationInvariantError

logger = logging.getLogger(__name__)


def allocate_atoms(atoms: int, weights: Sequence[int]) -> list[int]:
    """Split $atoms into integer parts proportional to $weights.

    Each part first gets its exact share truncated toward zero. The units left
    over are then handed out one at a time, cycling from the first to the last
    non-zero weight, so earlier parties receive any extra unit first. If every
    weight is zero, all parties are weighted equally.

    Args:
        atoms: Signed amount in minor units to split.
        weights: Non-negative integer weights, one per party. Not modified.

    Returns:
        list[int]: One part per weight, in the same order, summing to $atoms.

    Raises:
        ValueError: If $weights is empty or contains a negative weight.
        TypeError: If a weight is not an integer.
        AllocationInvariantError: If the parts do not add up to $atoms. This
            indicates a defect in the allocator, never bad input.

    Examples:
        >>> allocate_atoms(105, [3, 7])
        [32, 73]
        >>> allocate_atoms(5, [1, 1])
        [3, 2]
        >>> allocate_atoms(100, [0, 1, 0])
        [0, 100, 0]
    """
    weights = _validated_weights(weights)

    if not any(weights):
        logger.debug(f"All {len(weights)} weights are zero; splitting {atoms} atoms equally")
        weights = [1] * len(weights)

    parts = _truncated_shares(atoms, weights)
    parts = _distribute_remainder(atoms, weights, parts)
    _check_conservation(atoms, weights, parts)
    return parts


def _validated_weights(weights: Sequence[int]) -> list[int]:
    result = list(weights)

    # Raise: at least one party is needed
    if not result:
        raise ValueError("$weights cannot be empty. At least one weight must be provided.")

    for index, weight in enumerate(result):
        # Raise: weights must be plain integers
        if not isinstance(weight, int) or isinstance(weight, bool):
            raise TypeError(f"$weights[{index}] must be an int, but provided value is: {weight!r}")

        # Raise: weights must be non-negative
        if weight < 0:
            raise ValueError(f"$weights[{index}] must be >= 0, but provided value is: {weight}")

    return result


def _truncated_shares(atoms: int, weights: list[int]) -> list[int]:
    total = sum(weights)
    sign = -1 if atoms < 0 else 1
    magnitude = abs(atoms)
    # Floor division on magnitudes truncates toward zero
    return [sign * (magnitude * weight // total) for weight in weights]


def _distribute_remainder(atoms: int, weights: list[int], parts: list[int]) -> list[int]:
    parts = list(parts)
    remainder = atoms - sum(parts)
    if remainder == 0:
        return parts

    step = 1 if remainder > 0 else -1
    eligible = [index for index, weight in enumerate(weights) if weight != 0]
    logger.debug(f"Distributing remainder of {remainder} atoms across {len(eligible)} eligible part(s)")

    position = 0
    while remainder != 0:
        index = eligible[position % len(eligible)]
        parts[index] += step
        remainder -= step
        position += 1

    return parts


def _check_conservation(atoms: int, weights: list[int], parts: list[int]) -> None:
    allocated = sum(parts)
    if allocated != atoms:
        message = f"Bad allocation: started with {atoms} atoms but allocated {allocated}. Weights={weights}, parts={parts}"
        logger.error(message)
        raise AllocationInvariantError(message)
