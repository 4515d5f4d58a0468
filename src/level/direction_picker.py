import random
from typing import Optional, Set

from src.core.errors import InvalidArgumentError, InvalidStateError
from src.level.grid_types import DIRECTION_COUNT, DIRECTIONS, DirectionType


class DirectionPicker:
    """
    Hands out each of the four directions at most once per reset.

    The randomness value (0 - 100) biases the first pick after a reset:
    at 0 it always repeats the previous direction, so corridors run straight
    until they are blocked; at 100 it always turns. Every later pick in the
    same cycle is forced to be a new direction.
    """

    def __init__(self, initial_direction: Optional[DirectionType] = None,
                 randomness: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

        if randomness is None:
            randomness = self.rng.randint(0, 100)
        if randomness < 0 or randomness > 100:
            raise InvalidArgumentError("randomness must be between 0 and 100!")

        if initial_direction is None:
            initial_direction = self.rng.choice(DIRECTIONS)

        self.randomness = randomness
        self.previous_direction = initial_direction
        self.directions_picked: Set[DirectionType] = set()

    def reset(self, initial_direction: DirectionType) -> None:
        self.previous_direction = initial_direction
        self.directions_picked.clear()

    def has_next_direction(self) -> bool:
        return len(self.directions_picked) < DIRECTION_COUNT

    def next_direction(self) -> DirectionType:
        if not self.has_next_direction():
            raise InvalidStateError("All directions have been exhausted.")

        while True:
            if self._must_change_direction():
                direction = self._pick_different_direction()
            else:
                direction = self.previous_direction

            if direction not in self.directions_picked:
                break

        self.directions_picked.add(direction)
        return direction

    def _must_change_direction(self) -> bool:
        # Once anything has been picked this cycle, always turn
        return bool(self.directions_picked) or self.randomness > self.rng.randrange(100)

    def _pick_different_direction(self) -> DirectionType:
        # Stop rejecting the previous direction once it is the only one left
        while True:
            direction = self.rng.choice(DIRECTIONS)
            if direction != self.previous_direction \
                    or len(self.directions_picked) >= DIRECTION_COUNT - 1:
                return direction
