"""Birth/survival lookup table for standard Life (B3/S23)."""
import numpy as np

# Neighbour counts range over 0..8
MAX_NEIGHBORS = 8

CONWAY_BIRTH = (3,)
CONWAY_SURVIVE = (2, 3)


def get_bs_table(birth=CONWAY_BIRTH, survive=CONWAY_SURVIVE) -> np.ndarray:
    """Build the flat rule table indexed by ``alive * 9 + neighbors``.

    Args:
        birth: Neighbour counts that bring a dead cell to life
        survive: Neighbour counts that keep a live cell alive

    Returns:
        Boolean array of length 18
    """
    table = np.zeros(2 * (MAX_NEIGHBORS + 1), dtype=np.bool_)
    for count in birth:
        if 0 <= count <= MAX_NEIGHBORS:
            table[count] = True
    for count in survive:
        if 0 <= count <= MAX_NEIGHBORS:
            table[MAX_NEIGHBORS + 1 + count] = True
    table.flags.writeable = False
    return table


CONWAY_TABLE = get_bs_table()


def next_state(alive: bool, neighbors: int) -> bool:
    """Apply B3/S23 to a single cell."""
    if not 0 <= neighbors <= MAX_NEIGHBORS:
        raise ValueError(f"Neighbour count {neighbors} outside 0..{MAX_NEIGHBORS}")
    return bool(CONWAY_TABLE[int(bool(alive)) * (MAX_NEIGHBORS + 1) + neighbors])
