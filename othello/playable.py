"""Call contract a match host uses to drive an engine."""

from datetime import timedelta
from typing import List, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class Playable(Protocol):
    def get_name(self) -> str: ...

    def is_playable(self, column: int, line: int, is_white: bool) -> bool: ...

    def play_move(self, column: int, line: int, is_white: bool) -> bool: ...

    def get_next_move(self, game: Sequence[Sequence[int]], level: int, is_white_turn: bool) -> Tuple[int, int]: ...

    def get_board(self) -> List[List[int]]: ...

    def get_score(self, is_white: bool) -> int: ...

    def get_white_score(self) -> int: ...

    def get_black_score(self) -> int: ...

    def elapsed_white(self) -> timedelta: ...

    def elapsed_black(self) -> timedelta: ...
