from dnsgen.models import BasePermutator


class Duplication(BasePermutator):
    name = "duplication"
    high_cardinality = True
    uses_words = False

    def run(self, parts, words):
        yield parts.with_first_label(parts.first_label * 2)
