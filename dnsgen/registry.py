from dnsgen.modules import DEFAULT_PERMUTATORS


class PermutatorRegistry:
    def __init__(self):
        self._permutators = []

    def register(self, permutator):
        self._permutators.append(permutator)

    def register_defaults(self):
        for permutator in DEFAULT_PERMUTATORS:
            self.register(permutator())

    def all(self):
        return tuple(self._permutators)

    def __len__(self):
        return len(self._permutators)
