import itertools as it

### LABELS ###

# one counter shared by every prefix, so two labels of the
# same generator never collide even if the prefixes do

class LabelGenerator:
    def __init__(self):
        self.reset()

    def reset(self):
        self._counter = it.count()

    def fresh(self, prefix: str) -> str:
        return f"{prefix}{next(self._counter)}"
