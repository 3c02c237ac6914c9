"""Random selection of half of the enumerated paths."""

import random
from collections.abc import Sequence


def sample(paths: Sequence[str], rng: random.Random | None = None) -> list[str]:
    """Pick ``floor(len(paths) / 2)`` paths uniformly at random.

    The input is shuffled into a random permutation and the first half
    is returned in shuffled order. A single path yields nothing.

    Args:
        paths: Candidate paths. Not modified.
        rng: Random source, seed it for reproducible selections.
            Defaults to the module-level generator.

    Returns:
        Selected paths without duplicates.
    """
    shuffled = list(paths)
    if rng is None:
        random.shuffle(shuffled)
    else:
        rng.shuffle(shuffled)
    return shuffled[: len(shuffled) // 2]
