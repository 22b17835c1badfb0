import random


class ScriptedRandom(random.Random):
    """Test RNG: each shuffle() lays the deck out in the next scripted order, sample() keeps pool order."""

    def __init__(self, layouts):
        super().__init__(0)
        self._layouts = [list(layout) for layout in layouts]

    def shuffle(self, x):
        x[:] = self._layouts.pop(0)

    def sample(self, population, k):
        return list(population)[:k]
