# app/ticket/numbers.py
import logging
import random

from app.ticket.exceptions import NumbersExhaustedError

logger = logging.getLogger(__name__)

TICKET_NUMBER_MIN = 1000
TICKET_NUMBER_MAX = 9999


class TicketNumberRegistry:
    """Issues short ticket numbers that never repeat within a category.

    Numbers are drawn uniformly from ``[low, high]``. A draw that lands on a
    number already issued for the category is thrown away and redrawn. After
    ``max_attempts`` collisions in a row the number is chosen directly from the
    values still free, so ``issue`` always returns quickly, even for a nearly
    full category. Both ways of picking are uniform over the free numbers.

    Once every value of the range has been issued for a category, ``issue``
    raises ``NumbersExhaustedError``.

    The registry keeps no lock of its own; callers serialize access.
    """

    def __init__(
        self,
        low: int = TICKET_NUMBER_MIN,
        high: int = TICKET_NUMBER_MAX,
        max_attempts: int = 100,
        rng: random.Random | None = None,
    ):
        if low > high:
            raise ValueError(f"empty ticket number range: {low}..{high}")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.low = low
        self.high = high
        self.max_attempts = max_attempts
        self._rng = rng or random.Random()
        self._used: dict[str, set[int]] = {}

    @property
    def capacity(self) -> int:
        return self.high - self.low + 1

    def issue(self, category: str) -> int:
        used = self._used.setdefault(category, set())
        if len(used) >= self.capacity:
            raise NumbersExhaustedError(category)

        for _ in range(self.max_attempts):
            number = self._rng.randint(self.low, self.high)
            if number not in used:
                used.add(number)
                return number

        free = sorted(set(range(self.low, self.high + 1)) - used)
        number = self._rng.choice(free)
        logger.debug(
            "Picked ticket number from %d free values of %s after %d collisions",
            len(free), category, self.max_attempts,
        )
        used.add(number)
        return number

    def reserve(self, category: str, number: int) -> None:
        if not self.low <= number <= self.high:
            raise ValueError(f"ticket number {number} outside {self.low}..{self.high}")
        used = self._used.setdefault(category, set())
        if number in used:
            raise ValueError(f"ticket number {number} already issued for {category}")
        used.add(number)

    def issued(self, category: str) -> frozenset[int]:
        return frozenset(self._used.get(category, ()))

    def remaining(self, category: str) -> int:
        return self.capacity - len(self._used.get(category, ()))
