from dnsgen.config import WORD_SEPARATORS
from dnsgen.models import BasePermutator


class WordInsertion(BasePermutator):
    name = "insertion"

    def run(self, parts, words):
        host = parts.host_labels

        for word in words:
            for separator in WORD_SEPARATORS:
                if separator == ".":
                    # New labels never go right of the registrable name
                    for i in range(len(host)):
                        yield parts.join(host[:i] + (word,) + host[i:])
                    continue

                for i, label in enumerate(host):
                    for joined in (
                        f"{word}{separator}{label}",
                        f"{label}{separator}{word}",
                    ):
                        yield parts.join(host[:i] + (joined,) + host[i + 1 :])
