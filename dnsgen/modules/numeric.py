from dnsgen.config import NUMERIC_SUFFIXES
from dnsgen.models import BasePermutator


class NumericSuffix(BasePermutator):
    name = "numeric"
    high_cardinality = True
    uses_words = False

    def run(self, parts, words):
        label = parts.first_label
        for suffix in NUMERIC_SUFFIXES:
            yield parts.with_first_label(f"{label}{suffix}")
