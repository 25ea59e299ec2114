from typing import Dict, List, Optional

from monopoly.spaces import (
    Property,
    SpaceType,
    chance_space,
    community_chest_space,
    free_parking_space,
    go_space,
    go_to_jail_space,
    jail_space,
)


class Board:
    """The game board: a fixed ring of 28 spaces."""

    def __init__(self, spaces: Optional[List[Property]] = None):
        self.spaces: List[Property] = spaces if spaces is not None else self._create_standard_board()
        self._by_name: Dict[str, int] = {}
        for space in self.spaces:
            # Duplicate names (two Chance spaces) resolve to the first occurrence
            self._by_name.setdefault(space.name, space.position)

    def _create_standard_board(self) -> List[Property]:
        """Create the 28-space reference board."""
        return [
            go_space(0),
            Property("Mediterranean Avenue", 1, 60, 2),
            Property("Baltic Avenue", 2, 60, 4),
            Property("Oriental Avenue", 3, 100, 6),
            chance_space(4),
            Property("Vermont Avenue", 5, 100, 6),
            jail_space(6),
            Property("St. Charles Place", 7, 140, 10),
            Property("States Avenue", 8, 140, 10),
            Property("Virginia Avenue", 9, 160, 12),
            community_chest_space(10),
            Property("St. James Place", 11, 180, 14),
            Property("Tennessee Avenue", 12, 180, 14),
            Property("New York Avenue", 13, 200, 16),
            free_parking_space(14),
            Property("Kentucky Avenue", 15, 220, 18),
            Property("Indiana Avenue", 16, 220, 18),
            Property("Illinois Avenue", 17, 240, 20),
            go_to_jail_space(18),
            Property("Atlantic Avenue", 19, 260, 22),
            Property("Ventnor Avenue", 20, 260, 22),
            Property("Marvin Gardens", 21, 280, 24),
            Property("Pacific Avenue", 22, 300, 26),
            Property("North Carolina Avenue", 23, 300, 26),
            Property("Pennsylvania Avenue", 24, 320, 28),
            chance_space(25),
            Property("Park Place", 26, 350, 35),
            Property("Boardwalk", 27, 400, 50),
        ]

    def __len__(self) -> int:
        return len(self.spaces)

    def get_space(self, position: int) -> Property:
        """Get the space at the given position (wraps around the board)."""
        return self.spaces[position % len(self.spaces)]

    def position_of(self, name: str) -> int:
        """Board index of the first space with this name."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"No space named {name!r} on the board") from None

    def get_owned_by(self, player_name: str) -> List[Property]:
        return [s for s in self.spaces if s.owner == player_name]

    def is_card_space(self, position: int) -> bool:
        space = self.get_space(position)
        return space.space_type in (SpaceType.CHANCE, SpaceType.COMMUNITY_CHEST)
