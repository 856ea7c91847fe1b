"""Arbiter: rules engines for chess and 10x10 checkers.

Quick start::

    from arbiter.chess import MoveGenerator, GameState, create_initial_board
    from arbiter.types import parse_square

    board = create_initial_board()
    gen = MoveGenerator(board, GameState())
    for move in gen.valid_moves(parse_square("e2")):
        print(move)
"""

__version__ = "0.1.0"
