from lifebench.core.board import Board


def make_board(width, height, cells):
    """Board of the given size with ``cells`` (x, y) alive."""
    board = Board(width, height)
    for x, y in cells:
        board.set_cell(True, x, y)
    return board


def live_cells(board):
    return {(x, y) for y in range(board.height) for x in range(board.width)
            if board.get_cell(x, y)}


class FakeClock:
    """Microsecond clock that returns queued readings."""

    def __init__(self, *readings):
        self.readings = list(readings)

    def __call__(self):
        return self.readings.pop(0)
